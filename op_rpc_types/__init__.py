"""OP Stack RPC types: genesis info, receipt and transaction fields, supervisor errors, hex quantities."""

__version__ = "0.18.14"

__all__ = ["errors", "genesis", "quantity", "receipt", "transaction"]