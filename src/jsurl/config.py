from __future__ import annotations

from datetime import date, datetime, time
from pathlib import Path
from typing import TypeAlias
import tomllib

from jsurl.options import CodecOptions
from jsurl.schema import CodecConfigDTO

DEFAULT_CONFIG_NAME = "jsurl.toml"

TomlScalar: TypeAlias = str | int | float | bool | None | date | datetime | time
TomlValue: TypeAlias = TomlScalar | list["TomlValue"] | dict[str, "TomlValue"]
TomlTable: TypeAlias = dict[str, TomlValue]


def _load_toml(path: Path) -> TomlTable:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError:
        return {}
    try:
        data = tomllib.loads(raw)
    except tomllib.TOMLDecodeError:
        return {}
    return data if isinstance(data, dict) else {}


def load_config(root: Path | None = None, config_path: Path | None = None) -> TomlTable:
    if config_path is None:
        base = root if root is not None else Path.cwd()
        config_path = base / DEFAULT_CONFIG_NAME
    return _load_toml(config_path)


def codec_defaults(
    root: Path | None = None, config_path: Path | None = None
) -> TomlTable:
    data = load_config(root=root, config_path=config_path)
    section = data.get("codec", {})
    return section if isinstance(section, dict) else {}


def options_from_config(
    root: Path | None = None, config_path: Path | None = None
) -> CodecOptions:
    """Build ``CodecOptions`` from the ``[codec]`` table.

    A missing file or table yields the defaults; a table with unknown keys or
    out-of-range values raises ``pydantic.ValidationError``.
    """
    section = codec_defaults(root=root, config_path=config_path)
    return CodecConfigDTO.model_validate(section).to_options()
