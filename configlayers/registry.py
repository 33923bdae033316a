"""Registries that pick an encoder or decoder by format name."""

from __future__ import annotations

import threading
from typing import Any, Protocol, runtime_checkable


class EncodingError(Exception):
    """Base class for errors raised by the encoding registries."""


class DecoderNotFoundError(EncodingError):
    """No decoder is registered for the requested format."""

    def __init__(self, message: str = "decoder not found for this format") -> None:
        super().__init__(message)


class DecoderFormatAlreadyRegisteredError(EncodingError):
    """A decoder is already registered for the format."""

    def __init__(self, message: str = "decoder already registered for this format") -> None:
        super().__init__(message)


class EncoderNotFoundError(EncodingError):
    """No encoder is registered for the requested format."""

    def __init__(self, message: str = "encoder not found for this format") -> None:
        super().__init__(message)


class EncoderFormatAlreadyRegisteredError(EncodingError):
    """An encoder is already registered for the format."""

    def __init__(self, message: str = "encoder already registered for this format") -> None:
        super().__init__(message)


@runtime_checkable
class Decoder(Protocol):
    """Decodes raw bytes into a string-keyed dictionary."""

    def decode(self, b: bytes, v: dict[str, Any]) -> None:
        """Decode ``b`` and store the resulting keys into ``v``."""


@runtime_checkable
class Encoder(Protocol):
    """Encodes a string-keyed dictionary into bytes."""

    def encode(self, v: dict[str, Any]) -> bytes:
        """Return the byte representation of ``v``."""


class DecoderRegistry:
    """Chooses a decoder based on a format name."""

    def __init__(self) -> None:
        self._decoders: dict[str, Decoder] = {}
        self._lock = threading.Lock()

    def register_decoder(self, format: str, decoder: Decoder) -> None:
        """Register ``decoder`` for ``format``; formats cannot be registered twice."""
        with self._lock:
            if format in self._decoders:
                raise DecoderFormatAlreadyRegisteredError()
            self._decoders[format] = decoder

    def decode(self, format: str, b: bytes, v: dict[str, Any]) -> None:
        """Decode ``b`` into ``v`` with the decoder registered for ``format``."""
        with self._lock:
            decoder = self._decoders.get(format)
        if decoder is None:
            raise DecoderNotFoundError()
        decoder.decode(b, v)


class EncoderRegistry:
    """Chooses an encoder based on a format name."""

    def __init__(self) -> None:
        self._encoders: dict[str, Encoder] = {}
        self._lock = threading.Lock()

    def register_encoder(self, format: str, encoder: Encoder) -> None:
        """Register ``encoder`` for ``format``; formats cannot be registered twice."""
        with self._lock:
            if format in self._encoders:
                raise EncoderFormatAlreadyRegisteredError()
            self._encoders[format] = encoder

    def encode(self, format: str, v: dict[str, Any]) -> bytes:
        """Encode ``v`` with the encoder registered for ``format``."""
        with self._lock:
            encoder = self._encoders.get(format)
        if encoder is None:
            raise EncoderNotFoundError()
        return encoder.encode(v)