"""Static registry of supported chains and their token conventions.

Lookups here are pure: no I/O, no caching beyond the module-level tables.
"""

from .chains import (
    CHAINS,
    ZERO_CHAIN,
    Chain,
    chain_by_handle,
    chain_by_id,
    is_evm,
    iter_chains,
    try_chain_by_handle,
)
from .explorer import explorer_url_of
from .token_types import COIN_TYPE, TOKEN_TYPE, resolve_chain_from_type_tag, resolve_token_type

__all__ = [
    "CHAINS",
    "ZERO_CHAIN",
    "Chain",
    "chain_by_handle",
    "chain_by_id",
    "is_evm",
    "iter_chains",
    "try_chain_by_handle",
    "explorer_url_of",
    "COIN_TYPE",
    "TOKEN_TYPE",
    "resolve_chain_from_type_tag",
    "resolve_token_type",
]
