"""Path, environment and size helpers."""

from __future__ import annotations

import os
import re
import sys

from configlayers.logger import Logger

_ENV_PATTERN = re.compile(r"\$\{([^}]*)\}|\$([A-Za-z0-9_]+)")
_ZERO_DECIMAL = re.compile(r"^(.*)\.0+$")
_OCTAL = re.compile(r"^([+-]?)0([0-7_]+)$")

_INT64_MAX = 2**63 - 1
_UINT64_MAX = 2**64 - 1


class ConfigParseError(Exception):
    """Raised when a configuration file cannot be parsed."""

    def __init__(self, err: BaseException | str) -> None:
        self.err = err
        super().__init__(f"While parsing config: {err}")


def _expand_env(text: str) -> str:
    """Replace ``$VAR`` and ``${VAR}`` with their values; unset ones become empty."""
    return _ENV_PATTERN.sub(
        lambda m: os.environ.get(m.group(1) if m.group(1) is not None else m.group(2), ""),
        text,
    )


def user_home_dir() -> str:
    """Return the current user's home directory from the environment."""
    if sys.platform == "win32":
        home = os.environ.get("HOMEDRIVE", "") + os.environ.get("HOMEPATH", "")
        return home or os.environ.get("USERPROFILE", "")
    return os.environ.get("HOME", "")


def abs_pathify(logger: Logger, in_path: str) -> str:
    """Expand ``$HOME`` and environment variables and return a clean absolute path.

    Returns an empty string if the absolute path cannot be determined.
    """
    logger.info("trying to resolve absolute path", "path", in_path)

    if in_path == "$HOME" or in_path.startswith("$HOME" + os.sep):
        in_path = user_home_dir() + in_path[5:]

    in_path = _expand_env(in_path)

    if os.path.isabs(in_path):
        return os.path.normpath(in_path)

    try:
        return os.path.abspath(in_path)
    except OSError as exc:
        logger.error(f"could not discover absolute path: {exc}")
        return ""


def _to_int(text: str) -> int:
    """Parse an integer literal with an optional base prefix; 0 if invalid."""
    match = _ZERO_DECIMAL.match(text)
    if match:
        text = match.group(1)
    octal = _OCTAL.match(text)
    try:
        if octal:
            value = int(octal.group(1) + octal.group(2), 8)
        else:
            value = int(text, 0)
    except ValueError:
        return 0
    if not -_INT64_MAX - 1 <= value <= _INT64_MAX:
        return 0
    return value


def parse_size_in_bytes(size_str: str) -> int:
    """Convert sizes such as ``1GB`` or ``12 mb`` into a number of bytes.

    Invalid input gives 0, negative sizes are clamped to 0 and results that
    overflow an unsigned 64-bit integer give 0.
    """
    size_str = size_str.strip()
    last = len(size_str) - 1
    multiplier = 1

    if last > 1 and size_str[last] in "bB":
        unit = size_str[last - 1].lower()
        if unit in ("k", "m", "g"):
            multiplier = {"k": 1 << 10, "m": 1 << 20, "g": 1 << 30}[unit]
            size_str = size_str[: last - 1].strip()
        else:
            size_str = size_str[:last].strip()

    size = max(_to_int(size_str), 0)
    product = size * multiplier
    return product if product <= _UINT64_MAX else 0