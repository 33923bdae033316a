"""Helpers for nested, string-keyed configuration dictionaries."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def _string_map(m: dict) -> dict[str, Any]:
    """Return a copy of ``m`` whose keys are all strings."""
    return {k if isinstance(k, str) else str(k): v for k, v in m.items()}


def to_case_insensitive_value(value: Any) -> Any:
    """Return a lower-cased copy of ``value`` if it is a dictionary, else ``value``."""
    if isinstance(value, dict):
        return copy_and_insensitivise_map(_string_map(value))
    return value


def copy_and_insensitivise_map(m: dict) -> dict[str, Any]:
    """Return a deep copy of ``m`` with every dictionary key lower-cased."""
    result: dict[str, Any] = {}
    for key, val in m.items():
        lkey = str(key).lower()
        if isinstance(val, dict):
            result[lkey] = copy_and_insensitivise_map(_string_map(val))
        else:
            result[lkey] = val
    return result


def insensitivise_map(m: dict) -> None:
    """Lower-case every key of ``m`` and its nested dictionaries in place."""
    for key, val in list(m.items()):
        if isinstance(val, dict):
            if not all(isinstance(k, str) for k in val):
                val = _string_map(val)
            insensitivise_map(val)
        lower = str(key).lower()
        if key != lower:
            del m[key]
        m[lower] = val


def deep_search(m: dict[str, Any], path: Iterable[str]) -> dict[str, Any]:
    """Follow ``path`` through nested dictionaries and return the last one.

    Missing keys, or keys holding a non-dictionary value, are replaced by
    new empty dictionaries, so ``m`` may be modified.
    """
    for key in path:
        nested = m.get(key)
        if not isinstance(nested, dict):
            nested = {}
            m[key] = nested
        m = nested
    return m


def flatten_and_merge_map(
    shadow: dict[str, Any] | None,
    m: dict,
    prefix: str,
    delimiter: str,
) -> dict[str, Any]:
    """Flatten ``m`` into ``shadow`` with keys joined by ``delimiter``.

    Leaf keys are lower-cased. A prefix that already holds a value in
    ``shadow`` shadows everything below it.
    """
    if shadow is not None and prefix and shadow.get(prefix) is not None:
        return shadow
    if shadow is None:
        shadow = {}

    if prefix:
        prefix += delimiter
    for key, val in m.items():
        full_key = prefix + str(key)
        if isinstance(val, dict):
            shadow = flatten_and_merge_map(shadow, _string_map(val), full_key, delimiter)
        else:
            shadow[full_key.lower()] = val
    return shadow