"""
Unit tests for logging setup.
"""

import logging

import pytest

pytestmark = pytest.mark.unit
from src.logging_config import setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield root
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


class TestSetupLogging:
    """Test handler configuration"""

    def test_console_only(self, restore_root_logger):
        setup_logging(console_level=logging.INFO)
        handlers = restore_root_logger.handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.StreamHandler)
        assert handlers[0].level == logging.INFO
        assert restore_root_logger.level == logging.DEBUG

    def test_with_file(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "logs" / "stemwords.log"
        setup_logging(log_file=str(log_file))
        assert len(restore_root_logger.handlers) == 2
        logging.getLogger("src.stemming.test").info("hello from test")
        for handler in restore_root_logger.handlers:
            handler.flush()
        content = log_file.read_text(encoding="utf-8")
        assert "hello from test" in content
        assert "src.stemming.test" in content

    def test_no_duplicate_handlers(self, restore_root_logger):
        setup_logging()
        setup_logging()
        assert len(restore_root_logger.handlers) == 1
