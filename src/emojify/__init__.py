"""emojify - streaming translation between :alias: tokens and emoji."""

from importlib import metadata
from importlib import import_module
from pathlib import Path
import tomllib
from typing import TYPE_CHECKING


def _get_version() -> str:
    try:
        return metadata.version("emojify")
    except metadata.PackageNotFoundError:
        pass

    try:
        pyproject_path = Path(__file__).resolve().parents[2] / "pyproject.toml"
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
        return str(data["project"]["version"])
    except (OSError, KeyError, tomllib.TOMLDecodeError):
        return "unknown"


__version__ = _get_version()

if TYPE_CHECKING:
    from .core.config import ConfigLoader, get_config
    from .engine import (
        Direction,
        StreamPipeline,
        decode,
        decode_async,
        decode_text,
        encode,
        encode_async,
        encode_text,
        has_emoji,
        list_emojis,
    )
    from .table import AliasEntry, AliasTable, get_default_table, load_table

_LAZY_EXPORTS = {
    "encode": (".engine", "encode"),
    "decode": (".engine", "decode"),
    "encode_async": (".engine", "encode_async"),
    "decode_async": (".engine", "decode_async"),
    "encode_text": (".engine", "encode_text"),
    "decode_text": (".engine", "decode_text"),
    "has_emoji": (".engine", "has_emoji"),
    "list_emojis": (".engine", "list_emojis"),
    "Direction": (".engine", "Direction"),
    "StreamPipeline": (".engine", "StreamPipeline"),
    "AliasEntry": (".table", "AliasEntry"),
    "AliasTable": (".table", "AliasTable"),
    "get_default_table": (".table", "get_default_table"),
    "load_table": (".table", "load_table"),
    "ConfigLoader": (".core.config", "ConfigLoader"),
    "get_config": (".core.config", "get_config"),
}


def __getattr__(name):
    if name in {"core", "engine", "schemas", "table"}:
        module = import_module(f".{name}", __name__)
        globals()[name] = module
        return module

    if name not in _LAZY_EXPORTS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attr_name = _LAZY_EXPORTS[name]
    module = import_module(module_name, __name__)
    value = getattr(module, attr_name)
    globals()[name] = value
    return value


__all__ = [
    "encode",
    "decode",
    "encode_async",
    "decode_async",
    "encode_text",
    "decode_text",
    "has_emoji",
    "list_emojis",
    "Direction",
    "StreamPipeline",
    "AliasEntry",
    "AliasTable",
    "get_default_table",
    "load_table",
    "ConfigLoader",
    "get_config",
    "__version__",
]
