"""Configuration helpers for the golor command line."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

try:
    import tomllib
except ImportError:  # pragma: no cover - Python 3.11+ includes tomllib; fallback to tomli on older versions
    try:
        import tomli as tomllib
    except ImportError:
        tomllib = None

from .constants import DEFAULT_CONFIG_PATH

GRADIENT_MODES = ("foreground", "background", "both")

DEFAULT_CONFIG_TEXT = """# golor Configuration
# Settings used by the `golor demo` and `golor gradient` commands.

[demo]
text = "Pellentesque habitant morbi tristique senectus et netus et malesuada fames ac turpis egestas."

[gradient]
start = "000000"
end = "ff0000"
mode = "foreground"  # foreground | background | both

[logging]
level = "WARNING"
"""


class ConfigError(Exception):
    """Raised when configuration cannot be loaded."""


def write_default_config(config_path: str | Path = DEFAULT_CONFIG_PATH) -> Path:
    """
    Write the default configuration file if it does not already exist.

    Args:
        config_path: Path where the configuration should reside.

    Returns:
        The resolved path to the configuration file.
    """
    path = Path(config_path)
    if not path.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(DEFAULT_CONFIG_TEXT, encoding="utf-8")
    return path


STRING_KEYS = {
    "demo": ("text",),
    "gradient": ("start", "end", "mode"),
    "logging": ("level",),
}


def _validate(config: Dict[str, Any], path: Path) -> Dict[str, Any]:
    for table, keys in STRING_KEYS.items():
        section = config.get(table, {})
        if not isinstance(section, dict):
            raise ConfigError(f"[{table}] in {path} must be a table, got {section!r}")
        for key in keys:
            if key in section and not isinstance(section[key], str):
                raise ConfigError(f"{table}.{key} in {path} must be a string, got {section[key]!r}")

    mode = config.get("gradient", {}).get("mode", "foreground")
    if mode not in GRADIENT_MODES:
        raise ConfigError(f"Invalid gradient mode {mode!r} in {path}; expected one of {', '.join(GRADIENT_MODES)}")
    return config


def load_config(config_path: str | Path = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
    """
    Load configuration from a TOML file, creating a default file when missing.

    Args:
        config_path: Path to the TOML configuration file.

    Returns:
        Parsed configuration dictionary.

    Raises:
        ConfigError: If TOML support is unavailable, parsing fails or a value is invalid.
    """
    if tomllib is None:
        raise ConfigError("TOML support is required to load configuration.")

    path = write_default_config(config_path)

    try:
        with path.open("rb") as stream:
            return _validate(tomllib.load(stream), path)
    except (OSError, tomllib.TOMLDecodeError) as exc:  # type: ignore[attr-defined]
        raise ConfigError(f"Failed to load configuration from {path}") from exc
