"""Canonical derivation helpers.

Pure functions that compute the values the fixers reconcile on-disk state
against. Nothing here touches the filesystem and nothing is cached.
"""

from __future__ import annotations

from typing import Tuple

from eth_utils import is_hex_address, to_checksum_address

from regnorm.core.errors import DerivationError
from regnorm.core.registry import (
    explorer_url_of,
    resolve_chain_from_type_tag,
    resolve_token_type,
)

__all__ = [
    "checksum_of",
    "is_checksum_form",
    "target_dimensions",
    "resolve_token_type",
    "resolve_chain_from_type_tag",
    "explorer_url_of",
]


def checksum_of(name: str) -> str:
    """Return the EIP-55 checksum form of an address-like string.

    Raises DerivationError if name is not a 20-byte hex address.
    """

    if not isinstance(name, str) or not is_hex_address(name):
        raise DerivationError(f"Not a valid address: {name!r}")
    return to_checksum_address(name)


def is_checksum_form(name: str) -> bool:
    """True when name is a valid address already spelled in checksum case."""

    if not isinstance(name, str) or not is_hex_address(name):
        return False
    return to_checksum_address(name) == name


def target_dimensions(width: int, height: int, max_edge: int) -> Tuple[int, int]:
    """Scale (width, height) so the longer edge equals max_edge.

    The scale ratio is max_edge / max(width, height) and is applied to both
    edges, truncating toward zero. Integer arithmetic keeps the truncation
    exact, so the longer edge always lands on max_edge. Neither edge drops
    below one pixel, however thin the source.
    """

    if width <= 0 or height <= 0:
        raise ValueError(f"Invalid dimensions: {width}x{height}")
    if max_edge <= 0:
        raise ValueError(f"Invalid max edge: {max_edge}")

    longer = max(width, height)
    return max(1, (width * max_edge) // longer), max(1, (height * max_edge) // longer)
