from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from config import ConfigurationSet, config_from_dict, config_from_env, config_from_yaml

from player_style.exceptions import PlayerStyleException

_DEFAULTS: dict[str, object] = {
    "database": {
        "path": "~/.local/share/player_style/player_style.db",
    },
    "scoring": {
        "strict_fields": True,
    },
}

_TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})
_FALSE_STRINGS = frozenset({"0", "false", "no", "off"})


class SettingsError(PlayerStyleException):
    """Raised when a configuration value cannot be interpreted."""


@dataclass(frozen=True)
class Settings:
    db_path: Path
    strict_fields: bool


def create_config(
    yaml_path: str = "player_style.yaml",
    env_prefix: str = "PLAYER_STYLE",
    defaults: dict[str, object] | None = None,
    *,
    db_path: str | None = None,
) -> ConfigurationSet:
    """Create a layered configuration.

    Priority (highest to lowest): explicit overrides > env vars > YAML file > defaults dict.

    Args:
        yaml_path: Path to the YAML config file.
        env_prefix: Prefix for environment variables.
        defaults: Default configuration values.
        db_path: Override the database path.
    """
    if defaults is None:
        defaults = _DEFAULTS

    layers = [
        config_from_env(env_prefix, separator="__", lowercase_keys=True),
        config_from_yaml(yaml_path, read_from_file=True, ignore_missing_paths=True),
        config_from_dict(defaults),
    ]
    if db_path is not None:
        layers.insert(0, config_from_dict({"database": {"path": db_path}}))

    return ConfigurationSet(*layers)


def _parse_bool(key: str, value: object) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_STRINGS:
        return True
    if text in _FALSE_STRINGS:
        return False
    raise SettingsError(f"{key} must be a boolean, got {value!r}")


def load_settings(cfg: ConfigurationSet | None = None) -> Settings:
    if cfg is None:
        cfg = create_config()
    raw_path = str(cfg["database.path"]).strip()
    if not raw_path:
        raise SettingsError("database.path must not be empty")
    db_path = Path(raw_path) if raw_path == ":memory:" else Path(raw_path).expanduser()
    return Settings(
        db_path=db_path,
        strict_fields=_parse_bool("scoring.strict_fields", cfg["scoring.strict_fields"]),
    )
