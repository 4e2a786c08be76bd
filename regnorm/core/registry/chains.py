from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional

from regnorm.core.errors import UnknownChainError


@dataclass(frozen=True, slots=True)
class Chain:
    """Static metadata describing one supported blockchain network.

    The default-constructed value (id=0, empty handle) is the "zero chain"
    returned by tolerant lookups that found nothing.

    explorer_token_url is a str.format template taking the asset id. Chains
    without a template have no canonical explorer URL for their assets.
    """

    id: int = 0
    handle: str = ""
    name: str = ""
    symbol: str = ""
    is_evm: bool = False
    explorer_token_url: Optional[str] = None

    @property
    def is_zero(self) -> bool:
        return self.id == 0 and not self.handle


ZERO_CHAIN = Chain()


ETHEREUM = Chain(60, "ethereum", "Ethereum", "ETH", True, "https://etherscan.io/token/{}")
CLASSIC = Chain(61, "classic", "Ethereum Classic", "ETC", True, "https://etc.blockscout.com/token/{}")
SMARTCHAIN = Chain(20000714, "smartchain", "Smart Chain", "BNB", True, "https://bscscan.com/token/{}")
POLYGON = Chain(966, "polygon", "Polygon", "POL", True, "https://polygonscan.com/token/{}")
AVALANCHEC = Chain(10009000, "avalanchec", "Avalanche C-Chain", "AVAX", True, "https://snowtrace.io/token/{}")
ARBITRUM = Chain(10042221, "arbitrum", "Arbitrum", "ETH", True, "https://arbiscan.io/token/{}")
OPTIMISM = Chain(10000070, "optimism", "Optimism", "ETH", True, "https://optimistic.etherscan.io/token/{}")
FANTOM = Chain(10000250, "fantom", "Fantom", "FTM", True, "https://ftmscan.com/token/{}")
BASE = Chain(8453, "base", "Base", "ETH", True, "https://basescan.org/token/{}")
# Tron picks its template per asset id (TRC10 vs TRC20), see explorer.py.
TRON = Chain(195, "tron", "Tron", "TRX", False, "https://tronscan.io/#/token20/{}")
BINANCE = Chain(714, "binance", "BNB Beacon Chain", "BNB", False, "https://explorer.binance.org/asset/{}")
SOLANA = Chain(501, "solana", "Solana", "SOL", False, "https://solscan.io/token/{}")
COSMOS = Chain(118, "cosmos", "Cosmos Hub", "ATOM", False, None)


CHAINS: Dict[str, Chain] = {
    c.handle: c
    for c in (
        ETHEREUM,
        CLASSIC,
        SMARTCHAIN,
        POLYGON,
        AVALANCHEC,
        ARBITRUM,
        OPTIMISM,
        FANTOM,
        BASE,
        TRON,
        BINANCE,
        SOLANA,
        COSMOS,
    )
}

_BY_ID: Dict[int, Chain] = {c.id: c for c in CHAINS.values()}


def chain_by_handle(handle: str) -> Chain:
    """Look up a chain by its directory handle (e.g. "ethereum")."""
    try:
        return CHAINS[handle]
    except KeyError:
        raise UnknownChainError(f"Unknown chain handle: {handle!r}") from None


def chain_by_id(chain_id: int) -> Chain:
    """Look up a chain by numeric id."""
    try:
        return _BY_ID[chain_id]
    except KeyError:
        raise UnknownChainError(f"Unknown chain id: {chain_id}") from None


def try_chain_by_handle(handle: str) -> Optional[Chain]:
    return CHAINS.get(handle)


def is_evm(chain_id: int) -> bool:
    c = _BY_ID.get(chain_id)
    return bool(c and c.is_evm)


def iter_chains() -> Iterable[Chain]:
    """Iterate chains in table order."""
    return CHAINS.values()
