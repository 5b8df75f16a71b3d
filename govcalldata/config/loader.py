"""Config loader for the governance calldata tool."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, MutableMapping, Optional

from web3 import Web3

from govcalldata.core.params import DEFAULT_ARRAY_SEPARATOR
from govcalldata.core.proposal import NOUNS_DAO_PROXY_ADDRESS

DEFAULT_CONFIG_PATH = Path("govcalldata.json")
CONFIG_PATH_ENV = "GOVCALLDATA_CONFIG"
_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ConfigError(ValueError):
    """Raised when configuration data is invalid or missing."""


def _require_keys(data: Mapping[str, Any], keys: Iterable[str], context: str) -> None:
    missing = [key for key in keys if key not in data]
    if missing:
        raise ConfigError(f"{context} missing required keys: {', '.join(missing)}")


def _require_mapping(data: Any, context: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ConfigError(f"{context} must be a JSON object")
    return data


def _to_checksum(value: str, *, field_name: str) -> str:
    try:
        return Web3.to_checksum_address(value)
    except Exception as exc:  # web3 raises ValueError or TypeError for malformed inputs
        raise ConfigError(f"Invalid address for {field_name}: {value}") from exc


@dataclass(frozen=True)
class ProposalConfig:
    """Where generated proposal actions are sent."""

    dao_proxy_address: str = NOUNS_DAO_PROXY_ADDRESS


@dataclass(frozen=True)
class DisplayConfig:
    """How decoded values are rendered."""

    array_separator: str = DEFAULT_ARRAY_SEPARATOR


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "WARNING"


@dataclass(frozen=True)
class CalldataConfig:
    """Typed wrapper around the tool configuration."""

    proposal: ProposalConfig = field(default_factory=ProposalConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    raw: Mapping[str, Any] = field(default_factory=dict, repr=False)

    def to_dict(self) -> Dict[str, Any]:
        """Return the original configuration mapping."""
        return dict(self.raw)


def _load_json(path: Path) -> MutableMapping[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            return json.load(fh)
    except FileNotFoundError as exc:
        raise ConfigError(f"Config file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Config file contains invalid JSON: {path}") from exc


def _resolve_path(config_path: Optional[Path]) -> Optional[Path]:
    if config_path is not None:
        return Path(config_path)
    env_path = (os.getenv(CONFIG_PATH_ENV) or "").strip()
    if env_path:
        return Path(env_path)
    # The default file is optional; explicit paths are not.
    return DEFAULT_CONFIG_PATH if DEFAULT_CONFIG_PATH.exists() else None


def parse_config(data: Mapping[str, Any]) -> CalldataConfig:
    """Validate a configuration mapping. Every section is optional."""
    data = _require_mapping(data, "config")

    proposal_config = ProposalConfig()
    if "proposal" in data:
        proposal = _require_mapping(data["proposal"], "proposal")
        _require_keys(proposal, ["dao_proxy_address"], "proposal")
        proposal_config = ProposalConfig(
            dao_proxy_address=_to_checksum(proposal["dao_proxy_address"], field_name="dao_proxy_address")
        )

    display_config = DisplayConfig()
    if "display" in data:
        display = _require_mapping(data["display"], "display")
        _require_keys(display, ["array_separator"], "display")
        separator = display["array_separator"]
        if not isinstance(separator, str) or not separator:
            raise ConfigError("display.array_separator must be a non-empty string")
        display_config = DisplayConfig(array_separator=separator)

    logging_config = LoggingConfig()
    if "logging" in data:
        logging_data = _require_mapping(data["logging"], "logging")
        _require_keys(logging_data, ["level"], "logging")
        level = str(logging_data["level"]).upper()
        if level not in _LOG_LEVELS:
            raise ConfigError(f"logging.level must be one of {', '.join(_LOG_LEVELS)}")
        logging_config = LoggingConfig(level=level)

    return CalldataConfig(
        proposal=proposal_config,
        display=display_config,
        logging=logging_config,
        raw=data,
    )


def load_config(config_path: Optional[Path] = None) -> CalldataConfig:
    """Load and validate configuration, falling back to defaults.

    Lookup order: ``config_path``, ``$GOVCALLDATA_CONFIG``, then
    ``./govcalldata.json`` if it exists.
    """
    path = _resolve_path(config_path)
    if path is None:
        return CalldataConfig()
    return parse_config(_load_json(path))


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
