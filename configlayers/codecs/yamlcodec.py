"""YAML encoding for configuration dictionaries."""

from __future__ import annotations

from typing import Any

import yaml


class YamlCodec:
    """Encodes and decodes configuration dictionaries as YAML."""

    def encode(self, v: dict[str, Any]) -> bytes:
        """Return ``v`` as block-style YAML with sorted keys."""
        text = yaml.safe_dump(
            v, default_flow_style=False, sort_keys=True, allow_unicode=True
        )
        return text.encode("utf-8")

    def decode(self, b: bytes, v: dict[str, Any]) -> None:
        """Parse the YAML mapping in ``b`` and store its keys into ``v``."""
        data = yaml.safe_load(b)
        if data is None:
            return
        if not isinstance(data, dict):
            raise ValueError(
                f"yaml: cannot unmarshal {type(data).__name__} into a mapping"
            )
        v.update(data)