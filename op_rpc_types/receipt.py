"""OP-specific fields of RPC transaction receipts."""

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from .quantity import decode_optional_quantity, encode_optional_quantity

_U64_MAX = 2**64 - 1
_U128_MAX = 2**128 - 1

# (attribute, JSON key) pairs of the u128 quantity fields of L1BlockInfo.
_L1_QUANTITY_FIELDS = (
    ("l1_gas_price", "l1GasPrice"),
    ("l1_gas_used", "l1GasUsed"),
    ("l1_fee", "l1Fee"),
    ("l1_base_fee_scalar", "l1BaseFeeScalar"),
    ("l1_blob_base_fee", "l1BlobBaseFee"),
    ("l1_blob_base_fee_scalar", "l1BlobBaseFeeScalar"),
    ("operator_fee_scalar", "operatorFeeScalar"),
    ("operator_fee_constant", "operatorFeeConstant"),
)

_FEE_SCALAR_KEY = "l1FeeScalar"


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


def _format_scalar(value: float) -> str:
    """Render a float the way the wire format expects: plain decimal, no exponent."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _parse_scalar(value: Any) -> float | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"invalid type for {_FEE_SCALAR_KEY!r}: expected a string, got {value!r}")
    if not value or value != value.strip() or "_" in value:
        raise ValueError(f"invalid float literal for {_FEE_SCALAR_KEY!r}: {value!r}")
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"invalid float literal for {_FEE_SCALAR_KEY!r}: {value!r}") from None


def _require_mapping(data: Any, name: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"expected a JSON object for {name}, got {data!r}")
    return data


@dataclass(frozen=True)
class L1BlockInfo:
    """L1 block info extracted from the first transaction of every block."""

    l1_gas_price: int | None = None
    l1_gas_used: int | None = None
    l1_fee: int | None = None
    l1_fee_scalar: float | None = None
    l1_base_fee_scalar: int | None = None
    l1_blob_base_fee: int | None = None
    l1_blob_base_fee_scalar: int | None = None
    operator_fee_scalar: int | None = None
    operator_fee_constant: int | None = None

    def __post_init__(self) -> None:
        for name, _ in _L1_QUANTITY_FIELDS:
            _check_quantity(name, getattr(self, name), _U128_MAX)
        scalar = self.l1_fee_scalar
        if scalar is not None and (isinstance(scalar, bool) or not isinstance(scalar, (int, float))):
            raise TypeError(f"l1_fee_scalar must be a float or None, got {type(scalar).__name__}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> L1BlockInfo:
        """Decode from a camelCase JSON object; unknown keys are ignored."""
        data = _require_mapping(data, cls.__name__)
        values: dict[str, Any] = {
            name: _read_quantity(data, key, _U128_MAX) for name, key in _L1_QUANTITY_FIELDS
        }
        values["l1_fee_scalar"] = _parse_scalar(data.get(_FEE_SCALAR_KEY))
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """Encode as a camelCase JSON object, leaving out unset fields."""
        result: dict[str, Any] = {}
        for name, key in _L1_QUANTITY_FIELDS[:3]:
            value = getattr(self, name)
            if value is not None:
                result[key] = encode_optional_quantity(value)
        if self.l1_fee_scalar is not None:
            result[_FEE_SCALAR_KEY] = _format_scalar(float(self.l1_fee_scalar))
        for name, key in _L1_QUANTITY_FIELDS[3:]:
            value = getattr(self, name)
            if value is not None:
                result[key] = encode_optional_quantity(value)
        return result


@dataclass(frozen=True)
class OpTransactionReceiptFields:
    """Additional fields of OP transaction receipts."""

    l1_block_info: L1BlockInfo = field(default_factory=L1BlockInfo)
    deposit_nonce: int | None = None
    deposit_receipt_version: int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.l1_block_info, L1BlockInfo):
            raise TypeError("l1_block_info must be an L1BlockInfo")
        _check_quantity("deposit_nonce", self.deposit_nonce, _U64_MAX)
        _check_quantity("deposit_receipt_version", self.deposit_receipt_version, _U64_MAX)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> OpTransactionReceiptFields:
        """Decode from a flat camelCase JSON object; unknown keys are ignored."""
        data = _require_mapping(data, cls.__name__)
        return cls(
            l1_block_info=L1BlockInfo.from_dict(data),
            deposit_nonce=_read_quantity(data, "depositNonce", _U64_MAX),
            deposit_receipt_version=_read_quantity(data, "depositReceiptVersion", _U64_MAX),
        )

    def to_dict(self) -> dict[str, Any]:
        """Encode as a flat camelCase JSON object, leaving out unset fields."""
        result = self.l1_block_info.to_dict()
        if self.deposit_nonce is not None:
            result["depositNonce"] = encode_optional_quantity(self.deposit_nonce)
        if self.deposit_receipt_version is not None:
            result["depositReceiptVersion"] = encode_optional_quantity(
                self.deposit_receipt_version
            )
        return result

    @classmethod
    def from_json(cls, text: str | bytes) -> OpTransactionReceiptFields:
        """Decode from JSON text; raise ValueError on malformed input."""
        return cls.from_dict(json.loads(text))

    def to_json(self) -> str:
        """Encode as JSON text."""
        return json.dumps(self.to_dict())