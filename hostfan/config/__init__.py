from .loader import load_config
from .types import (
    ConfigError,
    FanoutConfig,
    UnsupportedConfigFormatError,
    validate_config,
)

__all__ = [
    "load_config",
    "FanoutConfig",
    "ConfigError",
    "UnsupportedConfigFormatError",
    "validate_config",
]
