"""Hex-encoded quantities as used by the Ethereum JSON-RPC interface."""

from __future__ import annotations

_PREFIX = "0x"


def encode_quantity(value: int) -> str:
    """Encode a non-negative integer as a ``0x``-prefixed hex quantity."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"quantity must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"quantity must be non-negative, got {value}")
    return f"{_PREFIX}{value:x}"


def decode_quantity(value: str | int) -> int:
    """Decode a ``0x``-prefixed hex quantity (or a plain non-negative integer)."""
    if isinstance(value, bool):
        raise ValueError("a boolean is not a quantity")
    if isinstance(value, int):
        if value < 0:
            raise ValueError(f"quantity must be non-negative, got {value}")
        return value
    if not isinstance(value, str):
        raise ValueError(f"invalid quantity type: {type(value).__name__}")
    if not value.startswith(_PREFIX):
        raise ValueError(f"quantity is missing the 0x prefix: {value!r}")
    digits = value[len(_PREFIX):]
    if not digits:
        raise ValueError("quantity has no digits")
    try:
        return int(digits, 16)
    except ValueError:
        raise ValueError(f"invalid hex quantity: {value!r}") from None


def encode_optional_quantity(value: int | None) -> str | None:
    """Encode a quantity, passing ``None`` through unchanged."""
    return None if value is None else encode_quantity(value)


def decode_optional_quantity(value: str | int | None) -> int | None:
    """Decode a quantity, passing ``None`` through unchanged."""
    return None if value is None else decode_quantity(value)