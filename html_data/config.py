"""Configuration loading for html_data."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Mapping, MutableMapping

try:
    import tomllib  # Python 3.11+
except ModuleNotFoundError:  # pragma: no cover - fallback for older interpreters
    import tomli as tomllib  # type: ignore

from .errors import HtmlDataError

logger = logging.getLogger(__name__)


class ConfigError(HtmlDataError, ValueError):
    """Raised when a configuration file carries an unusable value."""


@dataclass(slots=True)
class TableSettings:
    """Defaults applied to every :class:`~html_data.table.TableRenderer` built from config."""

    text_key: str | int = "text"
    indent_level: int = 0
    indent_unit: str = "    "
    allow_missing: bool = True
    missing_cell_text: str = ""
    row_counter_header: str = "#"
    use_pixels: bool = False


@dataclass(slots=True)
class Config:
    """Top-level configuration container."""

    table: TableSettings = field(default_factory=TableSettings)


def _load_toml(path: Path) -> Mapping[str, Any]:
    if not path.exists():
        logger.debug("Config file %s not found; using defaults", path)
        return {}
    with path.open("rb") as fh:
        return tomllib.load(fh)


def load_config(path: str | Path | None = None) -> Config:
    """Load configuration from ``path`` if provided, otherwise defaults.

    Parameters
    ----------
    path:
        Path to a ``config.toml`` file with an optional ``[table]`` section.
        When ``None`` or missing, the default configuration is returned.
    """

    cfg = Config()
    if path is None:
        return cfg

    data = _load_toml(Path(path))
    table_data = data.get("table")
    if isinstance(table_data, Mapping):
        cfg.table = _parse_table(table_data, base=cfg.table)
    elif table_data is not None:
        raise ConfigError("[table] must be a table of settings")
    return cfg


def _parse_table(data: Mapping[str, Any], base: TableSettings) -> TableSettings:
    overrides: MutableMapping[str, Any] = {}
    if "text_key" in data:
        value = data["text_key"]
        if isinstance(value, bool) or not isinstance(value, (str, int)) or value == "":
            raise ConfigError("table.text_key must be a non-empty string or an integer")
        overrides["text_key"] = value
    if "indent_level" in data:
        value = data["indent_level"]
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ConfigError("table.indent_level must be a non-negative integer")
        overrides["indent_level"] = value
    if "indent_unit" in data:
        overrides["indent_unit"] = _require_str(data, "indent_unit")
    if "allow_missing" in data:
        overrides["allow_missing"] = bool(data["allow_missing"])
    if "missing_cell_text" in data:
        overrides["missing_cell_text"] = _require_str(data, "missing_cell_text")
    if "row_counter_header" in data:
        overrides["row_counter_header"] = str(data["row_counter_header"])
    if "use_pixels" in data:
        overrides["use_pixels"] = bool(data["use_pixels"])
    if not overrides:
        return base
    return replace(base, **overrides)


def _require_str(data: Mapping[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise ConfigError(f"table.{key} must be a string")
    return value


__all__ = [
    "Config",
    "ConfigError",
    "TableSettings",
    "load_config",
]
