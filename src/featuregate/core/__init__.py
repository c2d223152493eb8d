"""Core module exports."""

from featuregate.core.errors import (
    ConfigError,
    ErrorCode,
    FeatureGateError,
    FeatureNotFoundError,
    InternalError,
    PublishError,
    ResolutionError,
)
from featuregate.core.logging import (
    clear_pull_id,
    configure_logging,
    get_logger,
    get_pull_id,
    set_pull_id,
)

__all__ = [
    # Errors
    "ConfigError",
    "ErrorCode",
    "FeatureGateError",
    "FeatureNotFoundError",
    "InternalError",
    "PublishError",
    "ResolutionError",
    # Logging
    "clear_pull_id",
    "configure_logging",
    "get_logger",
    "get_pull_id",
    "set_pull_id",
]
