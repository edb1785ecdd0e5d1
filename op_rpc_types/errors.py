"""Supervisor data availability error codes."""

from __future__ import annotations

from enum import IntEnum
from typing import Any


class SuperchainDAError(IntEnum):
    """Protocol-specific supervisor error codes."""

    # -3204XX DEADLINE_EXCEEDED
    UNINITIALIZED_CHAIN_DATABASE = -320400
    # -3205XX NOT_FOUND
    SKIPPED_DATA = -320500
    UNKNOWN_CHAIN = -320501
    # -3206XX ALREADY_EXISTS
    CONFLICTING_DATA = -320600
    INEFFECTIVE_DATA = -320601
    # -3209XX FAILED_PRECONDITION
    OUT_OF_ORDER = -320900
    AWAITING_REPLACEMENT = -320901
    # -3211XX OUT_OF_RANGE
    OUT_OF_SCOPE = -321100
    # -3212XX UNIMPLEMENTED
    NO_PARENT_FOR_FIRST_BLOCK = -321200
    # -3214XX UNAVAILABLE
    FUTURE_DATA = -321401
    # -3215XX DATA_LOSS
    MISSED_DATA = -321500
    DATA_CORRUPTION = -321501

    def message(self) -> str:
        """Human-readable description of the error."""
        return _MESSAGES[self]

    def __str__(self) -> str:
        return self.message()

    @classmethod
    def from_code(cls, code: int) -> SuperchainDAError:
        """Look up the error for a numeric code; raise ValueError if unknown."""
        if isinstance(code, bool) or not isinstance(code, int):
            raise ValueError(f"invalid error code: {code!r}")
        try:
            return cls(code)
        except ValueError:
            raise ValueError(f"unknown supervisor error code: {code}") from None

    def to_rpc_error(self) -> dict[str, Any]:
        """JSON-RPC error object for this error."""
        return {"code": int(self), "message": self.message()}

    def to_exception(self) -> SuperchainDAException:
        """Exception carrying this error."""
        return SuperchainDAException(self)


_MESSAGES = {
    SuperchainDAError.UNINITIALIZED_CHAIN_DATABASE: "chain database is not initialized",
    SuperchainDAError.SKIPPED_DATA: "data was skipped or pruned and is not available",
    SuperchainDAError.UNKNOWN_CHAIN: "unsupported chain id",
    SuperchainDAError.CONFLICTING_DATA: "conflicting data exists in the database",
    SuperchainDAError.INEFFECTIVE_DATA: "data is already known and didn't change anything",
    SuperchainDAError.OUT_OF_ORDER: "data is out of order (too old or new)",
    SuperchainDAError.AWAITING_REPLACEMENT: "waiting for replacement block before progress can be made",
    SuperchainDAError.OUT_OF_SCOPE: "data access not allowed due to limited scope",
    SuperchainDAError.NO_PARENT_FOR_FIRST_BLOCK: "cannot get parent of first block in database",
    SuperchainDAError.FUTURE_DATA: "data is not yet available (from the future)",
    SuperchainDAError.MISSED_DATA: "data may exist but was not found (possibly different revision)",
    SuperchainDAError.DATA_CORRUPTION: "underlying database has I/O issues or is corrupted",
}


class SuperchainDAException(Exception):
    """Raised to signal a supervisor data availability error."""

    def __init__(self, error: SuperchainDAError) -> None:
        super().__init__(error.message())
        self.error = error

    @property
    def code(self) -> int:
        return int(self.error)