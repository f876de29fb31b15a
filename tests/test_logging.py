import logging

from rationax import enable_console_logging, get_logger


def _console_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if h.name == "rationax_console"]


def test_get_logger_namespace():
    assert get_logger().name == "rationax"
    assert get_logger("parsing").name == "rationax.parsing"
    assert get_logger("rationax.core.fraction").name == "rationax.core.fraction"


def test_library_is_silent_by_default():
    """No handlers are installed on import"""
    assert _console_handlers(get_logger()) == []


def test_enable_console_logging_is_idempotent():
    try:
        logger = enable_console_logging()
        enable_console_logging(level=logging.INFO)
        assert len(_console_handlers(logger)) == 1
        assert logger.level == logging.INFO
        assert not logger.propagate
    finally:
        logger = enable_console_logging(False)
    assert _console_handlers(logger) == []
    assert logger.level == logging.NOTSET
    assert logger.propagate
