"""Configuration management"""

from .config_loader import ConfigError, ConfigLoader
from .decoder_config import AppConfig, DecoderSettings, HeaderFieldsConfig, LoggingConfig

__all__ = [
    "ConfigLoader",
    "ConfigError",
    "AppConfig",
    "DecoderSettings",
    "HeaderFieldsConfig",
    "LoggingConfig",
]
