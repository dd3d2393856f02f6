import logging

from rich.logging import RichHandler

from orgsize.rich_utils.ui_helpers import configure_logging, get_console, is_ci_environment


def test_ci_console_has_no_color(monkeypatch):
    monkeypatch.setenv("CI", "true")

    assert is_ci_environment() is True
    assert get_console().no_color is True


def test_configure_logging_installs_single_rich_handler():
    root = logging.getLogger()
    previous_level = root.level
    try:
        configure_logging(verbose=True)
        configure_logging(verbose=False)

        rich_handlers = [h for h in root.handlers if isinstance(h, RichHandler)]
        assert len(rich_handlers) == 1
        assert root.level == logging.WARNING

        configure_logging(verbose=True)
        assert root.level == logging.DEBUG
    finally:
        for handler in [h for h in root.handlers if isinstance(h, RichHandler)]:
            root.removeHandler(handler)
        root.setLevel(previous_level)
