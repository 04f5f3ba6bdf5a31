"""Configuration management module."""

from pythaccounts.core.config.settings import (
    COMPONENT_COUNT_POLICIES,
    ConfigManager,
    DecoderConfig,
    LoggingConfig,
    PythAccountsConfig,
    get_default_config,
    load_config_from_env,
)

__all__ = [
    "COMPONENT_COUNT_POLICIES",
    "ConfigManager",
    "DecoderConfig",
    "LoggingConfig",
    "PythAccountsConfig",
    "get_default_config",
    "load_config_from_env",
]
