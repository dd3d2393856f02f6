import math

import pytest

from orgsize.formatting import SIZE_UNITS, format_bytes
from orgsize.models import PackageSizeInfo


def test_zero_bytes_is_singular():
    assert format_bytes(0) == "0 Byte"


@pytest.mark.parametrize(
    "num_bytes,expected",
    [
        (1, "1.00 Bytes"),
        (1023, "1023.00 Bytes"),
        (1024, "1.00 KB"),
        (1536, "1.50 KB"),
        (2048, "2.00 KB"),
        (1024 ** 2, "1.00 MB"),
        (5 * 1024 ** 3, "5.00 GB"),
        (3 * 1024 ** 4, "3.00 TB"),
    ],
)
def test_format_bytes(num_bytes, expected):
    assert format_bytes(num_bytes) == expected


def test_half_way_values_round_up():
    # 1152 / 1024 == 1.125 exactly
    assert format_bytes(1152) == "1.13 KB"


def test_unit_index_follows_log_formula():
    for num_bytes in (7, 4097, 123456, 98765432):
        index = math.floor(math.log(num_bytes) / math.log(1024))
        value, unit = format_bytes(num_bytes).split(" ")
        assert unit == SIZE_UNITS[index]
        assert len(value.split(".")[1]) == 2


def test_package_size_info_derives_pretty_size():
    info = PackageSizeInfo.from_raw_size("@acme/widgets", 2048)
    assert info.size == "2.00 KB"
    assert info.raw_size == 2048


def test_package_size_info_is_immutable():
    info = PackageSizeInfo.from_raw_size("left-pad", 10)
    with pytest.raises(AttributeError):
        info.raw_size = 20
