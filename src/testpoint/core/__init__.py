"""Core module exports."""

from testpoint.core.errors import (
    ConfigError,
    ErrorCode,
    IndexingError,
    InternalError,
    TargetError,
    TestPointError,
)
from testpoint.core.logging import (
    clear_request_id,
    configure_logging,
    get_logger,
    get_request_id,
    install_quiet_default,
    set_request_id,
)

__all__ = [
    # Errors
    "TestPointError",
    "ConfigError",
    "ErrorCode",
    "IndexingError",
    "InternalError",
    "TargetError",
    # Logging
    "clear_request_id",
    "configure_logging",
    "get_logger",
    "get_request_id",
    "install_quiet_default",
    "set_request_id",
]
