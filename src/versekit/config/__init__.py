"""Public configuration API."""

from .loader import (
    CONFIG_FILENAME,
    describe_validation_error,
    discover_config,
    dotted_location,
    load_config,
)
from .models import ConfigBundle, FormatterConfig, ValidatorConfig

__all__ = [
    "CONFIG_FILENAME",
    "ConfigBundle",
    "FormatterConfig",
    "ValidatorConfig",
    "describe_validation_error",
    "discover_config",
    "dotted_location",
    "load_config",
]
