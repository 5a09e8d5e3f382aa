from loguru import logger

from duration_utils import DurationSettings, configure_logging, from_iso8601


def test_settings_from_env(monkeypatch):
    assert DurationSettings().log_enabled == False
    assert DurationSettings().log_level == "WARNING"

    monkeypatch.setenv("DURATION_UTILS_LOG_ENABLED", "true")
    monkeypatch.setenv("DURATION_UTILS_LOG_LEVEL", "debug")
    settings = DurationSettings()
    assert settings.log_enabled == True
    assert settings.log_level == "DEBUG"


def test_logging_disabled_by_default():
    messages = []
    handler_id = logger.add(messages.append, level="DEBUG")
    try:
        assert configure_logging(DurationSettings(log_enabled=False)) is None
        from_iso8601("bad")
    finally:
        logger.remove(handler_id)
    assert messages == []


def test_logging_level_filter():
    messages = []
    handler_id = configure_logging(DurationSettings(log_enabled=True, log_level="info"), sink=messages.append)
    try:
        from_iso8601("bad") # debug record, below the sink level
        logger.info("outside the package")
    finally:
        logger.remove(handler_id)
        logger.disable("duration_utils")
    assert messages == []
