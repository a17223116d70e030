"""Module de configuration."""

from rust_format.config.loader import (
    ConfigLoader,
    FileConfigLoader,
)
from rust_format.config.settings import (
    DEFAULT_TOOL_NAME,
    FormatterSettings,
    LoggingSettings,
    load_settings,
)

__all__ = [
    "ConfigLoader",
    "FileConfigLoader",
    "DEFAULT_TOOL_NAME",
    "FormatterSettings",
    "LoggingSettings",
    "load_settings",
]
