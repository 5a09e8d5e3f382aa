import pytest
from loguru import logger

from duration_utils import DurationSettings, configure_logging


@pytest.fixture
def log_messages():
    """ Enable duration_utils logging at DEBUG and collect the formatted messages """
    messages = []
    handler_id = configure_logging(DurationSettings(log_enabled=True, log_level="debug"), sink=messages.append)
    yield messages
    logger.remove(handler_id)
    logger.disable("duration_utils")
