"""Configuration management for the account decoders."""

from __future__ import annotations

import os
import tomllib
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from loguru import logger

from pythaccounts.core.constants import SUPPORTED_VERSIONS
from pythaccounts.core.exceptions.base import ConfigurationError

COMPONENT_COUNT_POLICIES = ("ignore", "warn", "strict")


@dataclass(frozen=True)
class DecoderConfig:
    """Decoder behaviour switches.

    ``validate_header`` runs the magic, version, type and used-size checks before
    any type-specific field is read. ``component_count_policy`` controls what
    happens when the sentinel-terminated component list disagrees with the
    declared component count.
    """

    validate_header: bool = True
    supported_versions: tuple[int, ...] = SUPPORTED_VERSIONS
    component_count_policy: str = "warn"
    text_encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if self.component_count_policy not in COMPONENT_COUNT_POLICIES:
            raise ConfigurationError(
                f"component_count_policy must be one of {', '.join(COMPONENT_COUNT_POLICIES)}",
                setting="component_count_policy",
                details={"value": self.component_count_policy},
            )
        if not self.supported_versions:
            raise ConfigurationError("supported_versions must not be empty", setting="supported_versions")
        object.__setattr__(self, "supported_versions", tuple(int(v) for v in self.supported_versions))


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    file: str | None = None


@dataclass
class PythAccountsConfig:
    """Top-level configuration."""

    decoder: DecoderConfig = field(default_factory=DecoderConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> PythAccountsConfig:
        """Build a configuration from a nested dictionary."""
        decoder_values = dict(config_dict.get("decoder", {}))
        if "supported_versions" in decoder_values:
            decoder_values["supported_versions"] = tuple(decoder_values["supported_versions"])
        try:
            decoder_config = DecoderConfig(**decoder_values)
            logging_config = LoggingConfig(**config_dict.get("logging", {}))
        except TypeError as exc:
            raise ConfigurationError(str(exc)) from exc
        return cls(decoder=decoder_config, logging=logging_config)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a nested dictionary."""
        decoder = asdict(self.decoder)
        decoder["supported_versions"] = list(self.decoder.supported_versions)
        return {"decoder": decoder, "logging": asdict(self.logging)}


class ConfigManager:
    """Loads configuration from a TOML file."""

    def __init__(self, config_path: Path | None = None):
        """Initialise the manager.

        Args:
            config_path: TOML file path, ``~/.pythaccounts/config.toml`` when omitted
        """
        self.config_path = config_path or Path.home() / ".pythaccounts" / "config.toml"
        self.config = self._load_config()

    def _load_config(self) -> PythAccountsConfig:
        if not self.config_path.exists():
            return PythAccountsConfig()

        try:
            with open(self.config_path, "rb") as f:
                config_dict = tomllib.load(f)
            return PythAccountsConfig.from_dict(config_dict)
        except (OSError, tomllib.TOMLDecodeError, ConfigurationError) as e:
            logger.warning("Failed to load config from {}: {}", self.config_path, e)
            return PythAccountsConfig()

    def get_config(self) -> PythAccountsConfig:
        """Return the current configuration."""
        return self.config

    def update_config(self, **updates: Any) -> None:
        """Apply nested updates to the current configuration."""
        config_dict = self.config.to_dict()

        def deep_update(d: dict[str, Any], u: dict[str, Any]) -> dict[str, Any]:
            for k, v in u.items():
                if isinstance(v, dict):
                    d[k] = deep_update(d.get(k, {}), v)
                else:
                    d[k] = v
            return d

        deep_update(config_dict, updates)
        self.config = PythAccountsConfig.from_dict(config_dict)


def get_default_config() -> PythAccountsConfig:
    """Return the default configuration."""
    return PythAccountsConfig()


def load_config_from_env() -> dict[str, Any]:
    """Read configuration overrides from ``PYTHACCOUNTS_*`` environment variables."""
    config: dict[str, Any] = {}

    decoder_config: dict[str, Any] = {}
    validate_header = os.getenv("PYTHACCOUNTS_VALIDATE_HEADER")
    if validate_header is not None:
        decoder_config["validate_header"] = validate_header.lower() == "true"
    supported_versions = os.getenv("PYTHACCOUNTS_SUPPORTED_VERSIONS")
    if supported_versions is not None:
        try:
            decoder_config["supported_versions"] = [
                int(part) for part in supported_versions.split(",") if part.strip()
            ]
        except ValueError as exc:
            raise ConfigurationError(
                "PYTHACCOUNTS_SUPPORTED_VERSIONS must be a comma separated list of integers",
                setting="supported_versions",
            ) from exc
    component_count_policy = os.getenv("PYTHACCOUNTS_COMPONENT_COUNT_POLICY")
    if component_count_policy is not None:
        decoder_config["component_count_policy"] = component_count_policy.lower()

    if decoder_config:
        config["decoder"] = decoder_config

    logging_config: dict[str, Any] = {}
    logging_level = os.getenv("PYTHACCOUNTS_LOGGING_LEVEL")
    if logging_level is not None:
        logging_config["level"] = logging_level
    logging_file = os.getenv("PYTHACCOUNTS_LOGGING_FILE")
    if logging_file is not None:
        logging_config["file"] = logging_file

    if logging_config:
        config["logging"] = logging_config

    return config
