"""
Settings and logging setup tests.

WHAT: Test CORS origin parsing and repeated logging setup
WHY: Both run at import time of the app and must behave on reload
HOW: Build Settings directly; call setup_logging against a temp file
"""

import logging

import pytest

from mandi.core.config import Settings
from mandi.utils.logger import CONSOLE_HANDLER_NAME, FILE_HANDLER_NAME, setup_logging


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way the test found it."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


def _mandi_handlers(root):
    return [h for h in root.handlers if h.get_name() in (CONSOLE_HANDLER_NAME, FILE_HANDLER_NAME)]


@pytest.mark.unit
def test_cors_origins_split_and_trimmed():
    settings = Settings(CORS_ORIGINS="http://a.test, http://b.test,,http://c.test ")

    assert settings.get_cors_origins_list() == ["http://a.test", "http://b.test", "http://c.test"]


@pytest.mark.unit
def test_setup_logging_is_idempotent(tmp_path, restore_root_logger):
    root = restore_root_logger
    log_file = tmp_path / "logs" / "app.log"

    setup_logging(log_file=str(log_file))
    setup_logging(log_file=str(log_file))

    assert len(_mandi_handlers(root)) == 2
    assert log_file.exists()


@pytest.mark.unit
def test_setup_logging_keeps_foreign_handlers(tmp_path, restore_root_logger):
    root = restore_root_logger
    other = logging.NullHandler()
    root.addHandler(other)

    setup_logging(log_file=str(tmp_path / "app.log"))

    assert other in root.handlers


@pytest.mark.unit
def test_console_level_follows_configuration(tmp_path, restore_root_logger):
    root = restore_root_logger

    setup_logging(level="DEBUG", log_file=str(tmp_path / "app.log"))

    levels = {h.get_name(): h.level for h in _mandi_handlers(root)}
    assert levels == {CONSOLE_HANDLER_NAME: logging.DEBUG, FILE_HANDLER_NAME: logging.DEBUG}

    setup_logging(level="warning", log_file=str(tmp_path / "app.log"))

    levels = {h.get_name(): h.level for h in _mandi_handlers(root)}
    assert levels == {CONSOLE_HANDLER_NAME: logging.WARNING, FILE_HANDLER_NAME: logging.DEBUG}
