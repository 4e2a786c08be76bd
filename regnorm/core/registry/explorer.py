from __future__ import annotations

from regnorm.core.errors import DerivationError

from .chains import TRON, Chain
from .token_types import is_trc10_id

_TRON_TRC10_URL = "https://tronscan.io/#/token/{}"


def explorer_url_of(chain: Chain, asset_id: str) -> str:
    """Build the canonical block-explorer URL for an asset on a chain.

    Raises DerivationError when the chain has no explorer template or the
    asset id is empty.
    """

    if not asset_id:
        raise DerivationError(f"Empty asset id for chain {chain.handle or chain.id}")

    if chain.id == TRON.id and is_trc10_id(asset_id):
        return _TRON_TRC10_URL.format(asset_id)

    if not chain.explorer_token_url:
        raise DerivationError(
            f"No explorer URL for chain {chain.handle or chain.id} and asset {asset_id}"
        )
    return chain.explorer_token_url.format(asset_id)
