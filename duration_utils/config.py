from typing import Annotated as A, Optional, Any
import sys, functools
from loguru import logger
from pydantic import StringConstraints
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE = "duration_utils"


class DurationSettings(BaseSettings):
    log_enabled: bool = False
    """ Emit log records from duration_utils. Libraries are silent by default. """

    log_level: A[str, StringConstraints(to_upper=True)] = "WARNING"

    model_config = SettingsConfigDict(
        frozen = True,
        env_prefix = 'DURATION_UTILS_',
        use_attribute_docstrings = True,
    )


@functools.cache
def get_settings():
    return DurationSettings()


def configure_logging(settings: Optional[DurationSettings] = None, sink: Any = sys.stderr):
    """
    Enable or disable duration_utils logging based on settings.
    Returns the loguru handler id of the added sink, or None if logging is disabled.
    """
    settings = settings or get_settings()
    if not settings.log_enabled:
        logger.disable(PACKAGE)
        return None

    logger.enable(PACKAGE)
    return logger.add(sink, level = settings.log_level, filter = PACKAGE)
