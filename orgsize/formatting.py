"""Human readable byte sizes."""

import math
from decimal import ROUND_HALF_UP, Decimal

SIZE_UNITS = ["Bytes", "KB", "MB", "GB", "TB"]


def format_bytes(num_bytes: int) -> str:
    """Format a byte count using base-1024 units and two decimals.

    ``0`` renders as ``"0 Byte"``. Rounding is half-up on the exact value of
    the scaled float, so ``1152`` bytes renders as ``"1.13 KB"``.
    """
    if num_bytes == 0:
        return "0 Byte"

    index = math.floor(math.log(num_bytes) / math.log(1024))
    index = min(max(index, 0), len(SIZE_UNITS) - 1)
    scaled = Decimal(num_bytes / math.pow(1024, index))
    return f"{scaled.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)} {SIZE_UNITS[index]}"
