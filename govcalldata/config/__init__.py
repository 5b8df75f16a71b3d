"""Configuration utilities for the calldata tool."""

from .loader import (
    CONFIG_PATH_ENV,
    CalldataConfig,
    ConfigError,
    DEFAULT_CONFIG_PATH,
    DisplayConfig,
    LoggingConfig,
    ProposalConfig,
    load_config,
    parse_config,
)

__all__ = [
    "CONFIG_PATH_ENV",
    "CalldataConfig",
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "DisplayConfig",
    "LoggingConfig",
    "ProposalConfig",
    "load_config",
    "parse_config",
]
