"""INI encoding for configuration dictionaries."""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from configlayers.maps import deep_search, flatten_and_merge_map

_DEFAULT_SECTION = "DEFAULT"
_MAX_INTERPOLATION_DEPTH = 99
_VARIABLE = re.compile(r"%\(([^)]+)\)s")


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


def _quote_value(value: str) -> str:
    if any(char in value for char in "#;") or value != value.strip():
        return f"`{value}`"
    return value


def _parse_value(raw: str) -> str:
    raw = raw.strip()
    for quote in ("`", '"'):
        if raw.startswith(quote):
            end = raw.find(quote, 1)
            if end != -1:
                return raw[1:end]
    return re.split(r"[#;]", raw, maxsplit=1)[0].strip()


def _parse(text: str) -> dict[str, dict[str, str]]:
    sections: dict[str, dict[str, str]] = {_DEFAULT_SECTION: {}}
    current = _DEFAULT_SECTION
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line[0] in "#;":
            continue
        if line.startswith("["):
            end = line.find("]")
            if end == -1:
                raise ValueError(f"unclosed section: {line}")
            current = line[1:end].strip() or _DEFAULT_SECTION
            sections.setdefault(current, {})
            continue
        match = re.match(r"([^=:]+)[=:](.*)", line)
        if match is None:
            raise ValueError(f"key-value delimiter not found: {line}")
        sections[current][match.group(1).strip()] = _parse_value(match.group(2))
    return sections


def _interpolate(sections: dict[str, dict[str, str]], section: str, value: str) -> str:
    def replace(match: re.Match[str]) -> str:
        name = match.group(1)
        for lookup in (sections[section], sections[_DEFAULT_SECTION]):
            if name in lookup:
                return lookup[name]
        return match.group(0)

    for _ in range(_MAX_INTERPOLATION_DEPTH):
        expanded = _VARIABLE.sub(replace, value)
        if expanded == value:
            break
        value = expanded
    return value


@dataclass
class IniCodec:
    """Encodes and decodes configuration dictionaries as INI files."""

    key_delimiter: str = ""

    def _delimiter(self) -> str:
        return self.key_delimiter or "."

    def encode(self, v: dict[str, Any]) -> bytes:
        """Flatten ``v`` and write it as INI; the last dotted part names the key."""
        flattened = flatten_and_merge_map({}, v, "", self._delimiter())
        sections: dict[str, dict[str, str]] = {"": {}}
        for key in sorted(flattened):
            section, _, name = key.rpartition(".")
            if section == "default":
                section = ""
            sections.setdefault(section, {})[name] = _to_string(flattened[key])

        out: list[str] = []
        for section, keys in sections.items():
            if not section and not keys:
                continue
            if section:
                out.append(f"[{section}]\n")
            out.extend(f"{k}={_quote_value(val)}\n" for k, val in keys.items())
            out.append("\n")
        return "".join(out).encode("utf-8")

    def decode(self, b: bytes, v: dict[str, Any]) -> None:
        """Parse INI ``b`` into ``v``; top-level keys land under ``DEFAULT``."""
        sections = _parse(b.decode("utf-8-sig"))
        for section, keys in sections.items():
            for key, raw in keys.items():
                deepest = deep_search(v, section.split(self._delimiter()))
                deepest[key] = _interpolate(sections, section, raw)