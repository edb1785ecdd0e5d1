"""OP-specific fields carried in a genesis file's chain config."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any, TypeVar

_U64_MAX = 2**64 - 1

_T = TypeVar("_T")


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _optional_u64(value: Any, key: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"invalid type for {key!r}: expected u64, got {value!r}")
    if not 0 <= value <= _U64_MAX:
        raise ValueError(f"value for {key!r} out of u64 range: {value}")
    return value


def _decode(cls: type[_T], data: Any) -> _T:
    if not isinstance(data, Mapping):
        raise ValueError(f"expected a JSON object for {cls.__name__}, got {data!r}")
    kwargs = {}
    for field in fields(cls):
        key = _camel(field.name)
        kwargs[field.name] = _optional_u64(data.get(key), key)
    return cls(**kwargs)


def _encode(obj: Any) -> dict[str, Any]:
    return {_camel(field.name): getattr(obj, field.name) for field in fields(obj)}


@dataclass(frozen=True)
class OpGenesisInfo:
    """Hardfork activation points of an OP chain."""

    bedrock_block: int | None = None
    regolith_time: int | None = None
    canyon_time: int | None = None
    ecotone_time: int | None = None
    fjord_time: int | None = None
    granite_time: int | None = None
    holocene_time: int | None = None
    isthmus_time: int | None = None
    interop_time: int | None = None
    jovian_time: int | None = None

    @classmethod
    def try_from(cls, others: Mapping[str, Any]) -> OpGenesisInfo:
        """Read the fields from the config's extra fields; raise ValueError on bad data."""
        return _decode(cls, others)

    @classmethod
    def extract_from(cls, others: Mapping[str, Any]) -> OpGenesisInfo | None:
        """Like :meth:`try_from`, but return None on failure."""
        try:
            return cls.try_from(others)
        except ValueError:
            return None

    def to_dict(self) -> dict[str, Any]:
        return _encode(self)


@dataclass(frozen=True)
class OpBaseFeeInfo:
    """EIP-1559 parameters of an OP chain."""

    eip1559_elasticity: int | None = None
    eip1559_denominator: int | None = None
    eip1559_denominator_canyon: int | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> OpBaseFeeInfo:
        """Decode from a camelCase JSON object."""
        return _decode(cls, data)

    @classmethod
    def try_from(cls, others: Mapping[str, Any]) -> OpBaseFeeInfo:
        """Read the ``optimism`` entry; raise ValueError if missing or invalid."""
        if not isinstance(others, Mapping) or "optimism" not in others:
            raise ValueError("missing field `optimism`")
        try:
            return cls.from_dict(others["optimism"])
        except ValueError:
            raise ValueError("missing field `optimism`") from None

    @classmethod
    def extract_from(cls, others: Mapping[str, Any]) -> OpBaseFeeInfo | None:
        """Like :meth:`try_from`, but return None on failure."""
        try:
            return cls.try_from(others)
        except ValueError:
            return None

    def to_dict(self) -> dict[str, Any]:
        return _encode(self)


@dataclass(frozen=True)
class OpChainInfo:
    """All OP-specific fields found in a genesis file."""

    genesis_info: OpGenesisInfo | None = None
    base_fee_info: OpBaseFeeInfo | None = None

    @classmethod
    def try_from(cls, others: Mapping[str, Any]) -> OpChainInfo:
        """Collect whichever parts can be read; missing parts become None."""
        return cls(
            genesis_info=OpGenesisInfo.extract_from(others),
            base_fee_info=OpBaseFeeInfo.extract_from(others),
        )

    @classmethod
    def extract_from(cls, others: Mapping[str, Any]) -> OpChainInfo | None:
        try:
            return cls.try_from(others)
        except ValueError:
            return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "genesisInfo": None if self.genesis_info is None else self.genesis_info.to_dict(),
            "baseFeeInfo": None if self.base_fee_info is None else self.base_fee_info.to_dict(),
        }