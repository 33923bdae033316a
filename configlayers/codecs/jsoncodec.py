"""JSON encoding for configuration dictionaries."""

from __future__ import annotations

import json
from typing import Any


class JsonCodec:
    """Encodes and decodes configuration dictionaries as JSON."""

    def encode(self, v: dict[str, Any]) -> bytes:
        """Return ``v`` as indented JSON with sorted keys."""
        return json.dumps(v, indent=2, sort_keys=True, ensure_ascii=False).encode("utf-8")

    def decode(self, b: bytes, v: dict[str, Any]) -> None:
        """Parse the JSON object in ``b`` and store its keys into ``v``."""
        data = json.loads(b)
        if data is None:
            return
        if not isinstance(data, dict):
            raise ValueError(f"json: cannot unmarshal {type(data).__name__} into a mapping")
        v.update(data)