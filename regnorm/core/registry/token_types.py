from __future__ import annotations

from typing import Dict, Tuple

from .chains import (
    ARBITRUM,
    AVALANCHEC,
    BASE,
    BINANCE,
    CLASSIC,
    ETHEREUM,
    FANTOM,
    OPTIMISM,
    POLYGON,
    SMARTCHAIN,
    SOLANA,
    TRON,
    ZERO_CHAIN,
    Chain,
)

# Type tag recorded for native-coin entries (chain descriptors, token-list coin rows).
COIN_TYPE = "coin"
TOKEN_TYPE = "token"

ERC20 = "ERC20"
ETC20 = "ETC20"
BEP2 = "BEP2"
BEP20 = "BEP20"
POLYGON_TOKEN = "POLYGON"
AVALANCHE_TOKEN = "AVALANCHE"
ARBITRUM_TOKEN = "ARBITRUM"
OPTIMISM_TOKEN = "OPTIMISM"
FANTOM_TOKEN = "FANTOM"
BASE_TOKEN = "BASE"
TRC10 = "TRC10"
TRC20 = "TRC20"
SPL = "SPL"

# One registered token standard per chain; tron is special-cased.
_CHAIN_TOKEN_TYPE: Dict[int, str] = {
    ETHEREUM.id: ERC20,
    CLASSIC.id: ETC20,
    SMARTCHAIN.id: BEP20,
    POLYGON.id: POLYGON_TOKEN,
    AVALANCHEC.id: AVALANCHE_TOKEN,
    ARBITRUM.id: ARBITRUM_TOKEN,
    OPTIMISM.id: OPTIMISM_TOKEN,
    FANTOM.id: FANTOM_TOKEN,
    BASE.id: BASE_TOKEN,
    BINANCE.id: BEP2,
    SOLANA.id: SPL,
}

_TYPE_CHAIN: Dict[str, Chain] = {
    ERC20: ETHEREUM,
    ETC20: CLASSIC,
    BEP2: BINANCE,
    BEP20: SMARTCHAIN,
    POLYGON_TOKEN: POLYGON,
    AVALANCHE_TOKEN: AVALANCHEC,
    ARBITRUM_TOKEN: ARBITRUM,
    OPTIMISM_TOKEN: OPTIMISM,
    FANTOM_TOKEN: FANTOM,
    BASE_TOKEN: BASE,
    TRC10: TRON,
    TRC20: TRON,
    SPL: SOLANA,
}


def is_trc10_id(asset_id: str) -> bool:
    """TRC10 tokens are identified by a purely numeric id."""
    return asset_id.isdigit()


def resolve_token_type(chain_id: int, asset_id: str) -> Tuple[str, bool]:
    """Return the registry token-type tag for a chain+asset pair.

    ok=False means the registry has no entry; callers fall back to the
    asset's self-reported type.
    """

    if chain_id == TRON.id:
        return (TRC10 if is_trc10_id(asset_id) else TRC20), True

    tag = _CHAIN_TOKEN_TYPE.get(chain_id)
    if tag is None:
        return "", False
    return tag, True


def resolve_chain_from_type_tag(tag: str) -> Chain:
    """Inverse lookup from a type tag to its chain.

    Tags are matched exactly. Unknown, empty or non-string input yields
    ZERO_CHAIN, never an exception.
    """

    if not isinstance(tag, str) or not tag:
        return ZERO_CHAIN
    return _TYPE_CHAIN.get(tag, ZERO_CHAIN)
