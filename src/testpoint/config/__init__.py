"""Config module exports."""

from testpoint.config.loader import TestPointSettings, load_config
from testpoint.config.models import (
    LoggingConfig,
    LogOutputConfig,
    RunnerConfig,
    TestPointConfig,
)

__all__ = [
    "load_config",
    "TestPointConfig",
    "TestPointSettings",
    "LoggingConfig",
    "LogOutputConfig",
    "RunnerConfig",
]
