"""Encoding for files of environment variable assignments."""

from __future__ import annotations

import os
import re
from typing import Any

from configlayers.maps import flatten_and_merge_map

_KEY_DELIMITER = "_"

_LINE = re.compile(
    r"""^\s*(?:export\s+)?([\w.]+)\s*=\s*"""
    r"""('(?:\\'|[^'])*'|"(?:\\"|[^"])*"|[^#\n]*?)\s*(?:#.*)?$"""
)
_VARIABLE = re.compile(r"(\\)?\$\{?([A-Za-z0-9_]+)\}?")
_ESCAPES = {"n": "\n", "r": "\r", "t": "\t", '"': '"', "\\": "\\"}


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "<nil>"
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    if isinstance(value, list):
        return "[" + " ".join(_format_value(item) for item in value) + "]"
    return str(value)


def _expand(text: str, env: dict[str, str]) -> str:
    def replace(match: re.Match[str]) -> str:
        if match.group(1):
            return match.group(0)[1:]
        name = match.group(2)
        return env[name] if name in env else os.environ.get(name, "")

    return _VARIABLE.sub(replace, text)


def _parse_value(raw: str, env: dict[str, str]) -> str:
    if len(raw) >= 2 and raw[0] == raw[-1] == "'":
        return raw[1:-1]
    if len(raw) >= 2 and raw[0] == raw[-1] == '"':
        inner = re.sub(r"\\([nrt\"\\])", lambda m: _ESCAPES[m.group(1)], raw[1:-1])
        return _expand(inner, env)
    return _expand(raw, env)


class DotenvCodec:
    """Encodes and decodes ``KEY=value`` environment files."""

    def encode(self, v: dict[str, Any]) -> bytes:
        """Flatten ``v`` with ``_`` and write sorted, upper-cased assignments."""
        flattened = flatten_and_merge_map({}, v, "", _KEY_DELIMITER)
        lines = (f"{key.upper()}={_format_value(flattened[key])}\n" for key in sorted(flattened))
        return "".join(lines).encode("utf-8")

    def decode(self, b: bytes, v: dict[str, Any]) -> None:
        """Parse every assignment in ``b`` into ``v``; malformed lines raise ValueError."""
        env: dict[str, str] = {}
        for line in b.decode("utf-8").splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            match = _LINE.match(line)
            if match is None:
                raise ValueError(f"line `{line}` doesn't match format")
            env[match.group(1)] = _parse_value(match.group(2), env)
        v.update(env)