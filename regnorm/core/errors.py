from __future__ import annotations

from typing import Optional


class RegistryError(Exception):
    """
    Base exception for all reconciliation failures.
    """

    pass


class DerivationError(RegistryError):
    """
    Raised when a canonical value cannot be derived (malformed address,
    unsupported chain/asset combination).
    """

    pass


class UnknownChainError(RegistryError, LookupError):
    """
    Raised when a chain handle or id is not present in the registry table.
    """

    pass


class RegistryIOError(RegistryError):
    """
    Raised when reading, parsing, writing or renaming an on-disk file fails.

    Carries the path and the operation so the driver can log usefully.
    """

    def __init__(self, path: str, operation: str, reason: Optional[str] = None) -> None:
        self.path = str(path)
        self.operation = operation
        self.reason = reason
        msg = f"{operation} failed for {self.path}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)
