"""Command-line flag values that can be bound to a configuration."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

_TRUE = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE = {"0", "f", "F", "FALSE", "false", "False"}


@runtime_checkable
class FlagValue(Protocol):
    """A single flag whose value can be bound to a configuration key."""

    def has_changed(self) -> bool:
        """Return whether the flag was set explicitly."""

    def name(self) -> str:
        """Return the flag's name."""

    def value_string(self) -> str:
        """Return the flag's value as a string."""

    def value_type(self) -> str:
        """Return the name of the flag's value type."""


@runtime_checkable
class FlagValueSet(Protocol):
    """A collection of flags that can be visited one by one."""

    def visit_all(self, fn: Callable[[FlagValue], Any]) -> None:
        """Call ``fn`` for every flag in the set."""


def _parse_bool(text: str) -> str:
    if text in _TRUE:
        return "true"
    if text in _FALSE:
        return "false"
    raise ValueError(f"invalid syntax for bool: {text!r}")


def _parse_int(text: str) -> str:
    try:
        return str(int(text, 0))
    except ValueError as exc:
        raise ValueError(f"invalid syntax for int: {text!r}") from exc


def _parse_float(text: str) -> str:
    try:
        result = repr(float(text))
    except ValueError as exc:
        raise ValueError(f"invalid syntax for float64: {text!r}") from exc
    return result[:-2] if result.endswith(".0") else result


_PARSERS: dict[str, Callable[[str], str]] = {
    "string": str,
    "bool": _parse_bool,
    "int": _parse_int,
    "float64": _parse_float,
}


def _to_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class Flag:
    """A named flag holding a typed value and whether it was changed."""

    def __init__(self, name: str, default: Any = "", value_type: str = "string") -> None:
        if value_type not in _PARSERS:
            raise ValueError(f"unsupported flag type: {value_type!r}")
        self._name = name
        self._type = value_type
        self._value = _PARSERS[value_type](_to_text(default))
        self._changed = False

    def __repr__(self) -> str:
        return f"Flag({self._name!r}, {self._value!r}, {self._type!r})"

    def has_changed(self) -> bool:
        """Return whether the flag was set after creation."""
        return self._changed

    def name(self) -> str:
        """Return the flag's name."""
        return self._name

    def value_string(self) -> str:
        """Return the flag's current value in canonical string form."""
        return self._value

    def value_type(self) -> str:
        """Return the name of the flag's value type."""
        return self._type

    def set(self, value: Any) -> None:
        """Parse and store ``value``, marking the flag as changed.

        Raises ValueError if ``value`` is not valid for the flag's type.
        """
        self._value = _PARSERS[self._type](_to_text(value))
        self._changed = True


class FlagSet:
    """A named collection of flags, visited in lexicographical order."""

    def __init__(self) -> None:
        self._flags: dict[str, Flag] = {}

    def add(self, name: str, default: Any = "", value_type: str = "string") -> Flag:
        """Define a new flag and return it; a name can be defined only once."""
        if name in self._flags:
            raise ValueError(f"flag redefined: {name}")
        flag = Flag(name, default, value_type)
        self._flags[name] = flag
        return flag

    def lookup(self, name: str) -> Flag | None:
        """Return the flag called ``name``, or None if there is none."""
        return self._flags.get(name)

    def visit_all(self, fn: Callable[[FlagValue], Any]) -> None:
        """Call ``fn`` for every flag, sorted by name."""
        for name in sorted(self._flags):
            fn(self._flags[name])