"""OP-specific fields of RPC transactions."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .quantity import decode_optional_quantity, encode_optional_quantity

_U64_MAX = 2**64 - 1
_U128_MAX = 2**128 - 1
_HASH_LENGTH = 32


def _read_quantity(data: Mapping[str, Any], key: str, limit: int) -> int | None:
    try:
        value = decode_optional_quantity(data.get(key))
    except (TypeError, ValueError) as exc:
        raise ValueError(f"invalid value for {key!r}: {exc}") from None
    if value is not None and value > limit:
        raise ValueError(f"value for {key!r} out of range: {value}")
    return value


def _check_quantity(name: str, value: int | None, limit: int) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer or None, got {type(value).__name__}")
    if not 0 <= value <= limit:
        raise ValueError(f"{name} out of range: {value}")


def _parse_hash(value: Any) -> bytes | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"invalid type for 'sourceHash': expected a hex string, got {value!r}")
    digits = value[2:] if value[:2] in ("0x", "0X") else value
    try:
        raw = bytes.fromhex(digits) if digits.isascii() and " " not in digits else None
    except ValueError:
        raw = None
    if raw is None or len(digits) != 2 * _HASH_LENGTH:
        raise ValueError(f"invalid 32-byte hash for 'sourceHash': {value!r}")
    return raw


@dataclass(frozen=True)
class OpTransactionFields:
    """Fields that OP deposit transactions add to an RPC transaction."""

    mint: int | None = None
    source_hash: bytes | None = None
    is_system_tx: bool | None = None
    deposit_receipt_version: int | None = None

    def __post_init__(self) -> None:
        _check_quantity("mint", self.mint, _U128_MAX)
        _check_quantity("deposit_receipt_version", self.deposit_receipt_version, _U64_MAX)
        if self.source_hash is not None:
            if not isinstance(self.source_hash, (bytes, bytearray)):
                raise TypeError("source_hash must be bytes or None")
            if len(self.source_hash) != _HASH_LENGTH:
                raise ValueError(
                    f"source_hash must be {_HASH_LENGTH} bytes, got {len(self.source_hash)}"
                )
            object.__setattr__(self, "source_hash", bytes(self.source_hash))
        if self.is_system_tx is not None and not isinstance(self.is_system_tx, bool):
            raise TypeError("is_system_tx must be a bool or None")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> OpTransactionFields:
        """Decode from a camelCase JSON object; unknown keys are ignored."""
        if not isinstance(data, Mapping):
            raise ValueError(f"expected a JSON object for {cls.__name__}, got {data!r}")
        is_system_tx = data.get("isSystemTx")
        if is_system_tx is not None and not isinstance(is_system_tx, bool):
            raise ValueError(f"invalid type for 'isSystemTx': expected a bool, got {is_system_tx!r}")
        return cls(
            mint=_read_quantity(data, "mint", _U128_MAX),
            source_hash=_parse_hash(data.get("sourceHash")),
            is_system_tx=is_system_tx,
            deposit_receipt_version=_read_quantity(data, "depositReceiptVersion", _U64_MAX),
        )

    def to_dict(self) -> dict[str, Any]:
        """Encode as a camelCase JSON object, leaving out unset fields."""
        result: dict[str, Any] = {}
        if self.mint is not None:
            result["mint"] = encode_optional_quantity(self.mint)
        if self.source_hash is not None:
            result["sourceHash"] = "0x" + self.source_hash.hex()
        if self.is_system_tx is not None:
            result["isSystemTx"] = self.is_system_tx
        if self.deposit_receipt_version is not None:
            result["depositReceiptVersion"] = encode_optional_quantity(
                self.deposit_receipt_version
            )
        return result

    @classmethod
    def from_json(cls, text: str | bytes) -> OpTransactionFields:
        """Decode from JSON text; raise ValueError on malformed input."""
        return cls.from_dict(json.loads(text))

    def to_json(self) -> str:
        """Encode as JSON text."""
        return json.dumps(self.to_dict())