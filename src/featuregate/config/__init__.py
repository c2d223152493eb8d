"""Config module exports."""

from featuregate.config.loader import load_config
from featuregate.config.models import (
    FeatureGateConfig,
    LoggingConfig,
    LogOutputConfig,
    SupplyConfig,
)

__all__ = [
    "load_config",
    "FeatureGateConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "SupplyConfig",
]
