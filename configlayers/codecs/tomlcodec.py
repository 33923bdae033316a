"""TOML encoding for configuration dictionaries."""

from __future__ import annotations

import datetime
import json
import re
import tomllib
from typing import Any

_BARE_KEY = re.compile(r"^[A-Za-z0-9_-]+$")


def _key(key: Any) -> str:
    key = str(key)
    return key if _BARE_KEY.match(key) else json.dumps(key, ensure_ascii=False)


def _value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
        return value.isoformat()
    if isinstance(value, list):
        return "[" + ", ".join(_value(item) for item in value) + "]"
    if isinstance(value, dict):
        inner = ", ".join(f"{_key(k)} = {_value(val)}" for k, val in value.items())
        return "{ " + inner + " }" if inner else "{}"
    raise TypeError(f"unsupported value type for TOML: {type(value).__name__}")


def _is_table(value: Any) -> bool:
    if isinstance(value, dict):
        return True
    return isinstance(value, list) and bool(value) and all(isinstance(i, dict) for i in value)


def _write_table(out: list[str], table: dict, path: list[str], indent: str) -> None:
    keys = sorted(table, key=str)
    for key in (k for k in keys if not _is_table(table[k])):
        out.append(f"{indent}{_key(key)} = {_value(table[key])}\n")
    for key in (k for k in keys if _is_table(table[k])):
        sub_path = [*path, _key(key)]
        header = ".".join(sub_path)
        value = table[key]
        if isinstance(value, dict):
            out.append(f"\n{indent}[{header}]\n")
            _write_table(out, value, sub_path, indent + "  ")
        else:
            for element in value:
                out.append(f"\n{indent}[[{header}]]\n")
                _write_table(out, element, sub_path, indent + "  ")


class TomlCodec:
    """Encodes and decodes configuration dictionaries as TOML."""

    def encode(self, v: dict[str, Any]) -> bytes:
        """Return ``v`` as TOML: plain values first, then tables, keys sorted."""
        out: list[str] = []
        _write_table(out, v, [], "")
        return "".join(out).encode("utf-8")

    def decode(self, b: bytes, v: dict[str, Any]) -> None:
        """Parse the TOML document in ``b`` and store its keys into ``v``."""
        v.update(tomllib.loads(b.decode("utf-8")))