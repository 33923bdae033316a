"""Java properties encoding for configuration dictionaries."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from configlayers.maps import deep_search, flatten_and_merge_map

_WHITESPACE = " \t\f"
_UNESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_ESCAPES = {"\\": "\\\\", "\n": "\\n", "\r": "\\r", "\t": "\\t", "\f": "\\f"}


def _to_string(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else format(Decimal(repr(value)), "f")
    return ""


def _expand(text: str, keys: list[str], values: dict[str, str]) -> str:
    def replace(match: re.Match[str]) -> str:
        key = match.group(1)
        if key in keys:
            raise ValueError(f"circular reference in: {', '.join([*keys, key])}")
        value = values[key] if key in values else os.environ.get(key, "")
        return _expand(value, [*keys, key], values)

    return re.sub(r"\$\{([^}]*)\}", replace, text)


def _unescape(text: str) -> str:
    def replace(match: re.Match[str]) -> str:
        escaped = match.group(1)
        if escaped.startswith("u"):
            return chr(int(escaped[1:], 16))
        return _UNESCAPES.get(escaped, escaped)

    return re.sub(r"\\(u[0-9a-fA-F]{4}|.?)", replace, text)


def _escape(text: str, special: str = "") -> str:
    return "".join(_ESCAPES.get(c, "\\" + c if c in special else c) for c in text)


@dataclass
class _Properties:
    """Ordered properties with comments attached to the key that follows them."""

    values: dict[str, str] = field(default_factory=dict)
    comments: dict[str, list[str]] = field(default_factory=dict)

    def get(self, key: str) -> str:
        return _expand(self.values[key], [key], self.values)

    def set(self, key: str, value: str) -> None:
        _expand(value, [key], {**self.values, key: value})
        self.values[key] = value

    def write(self, prefix: str) -> str:
        out: list[str] = []
        for index, (key, value) in enumerate(self.values.items()):
            comments = self.comments.get(key, [])
            if comments:
                if index > 0:
                    out.append("\n")
                out.extend(f"{prefix}{comment}\n" for comment in comments)
            out.append(f"{_escape(key, ' :=')} = {_escape(value)}\n")
        return "".join(out)


def _parse(text: str) -> _Properties:
    props = _Properties()
    pending: list[str] = []
    continued = ""
    for raw in text.splitlines():
        line = continued + raw.lstrip(_WHITESPACE)
        if not continued:
            if not line:
                continue
            if line[0] in "#!":
                pending.append(line[1:].lstrip(_WHITESPACE))
                continue
        if (len(line) - len(line.rstrip("\\"))) % 2 == 1:
            continued = line[:-1]
            continue
        continued = ""
        match = re.match(r"((?:\\.|[^=:\s])*)\s*[=:]?\s*(.*)", line, re.DOTALL)
        key = _unescape(match.group(1))
        props.values[key] = _unescape(match.group(2))
        if pending:
            props.comments[key] = pending
        pending = []
    for key in props.values:
        props.get(key)
    return props


@dataclass
class PropertiesCodec:
    """Encodes and decodes configuration dictionaries as Java properties.

    Properties read by :meth:`decode` are kept so that a later :meth:`encode`
    writes them back in their original order with their comments.
    """

    key_delimiter: str = ""
    properties: _Properties | None = field(default=None, repr=False)

    def _delimiter(self) -> str:
        return self.key_delimiter or "."

    def encode(self, v: dict[str, Any]) -> bytes:
        """Merge the flattened ``v`` into the kept properties and write them."""
        if self.properties is None:
            self.properties = _Properties()
        flattened = flatten_and_merge_map({}, v, "", self._delimiter())
        for key in sorted(flattened):
            self.properties.set(key, _to_string(flattened[key]))
        return self.properties.write("#").encode("utf-8")

    def decode(self, b: bytes, v: dict[str, Any]) -> None:
        """Parse properties ``b`` into nested dictionaries in ``v``."""
        self.properties = _parse(b.decode("utf-8"))
        for key in self.properties.values:
            path = key.split(self._delimiter())
            deepest = deep_search(v, path[:-1])
            deepest[path[-1].lower()] = self.properties.get(key)