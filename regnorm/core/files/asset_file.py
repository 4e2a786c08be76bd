from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import Optional

from regnorm.core.registry import Chain, try_chain_by_handle

from .layout import RegistryLayout


class FileKind(str, Enum):
    ASSET_FOLDER = "asset-folder"
    ASSET_INFO = "asset-info"
    ASSET_LOGO = "asset-logo"
    CHAIN_INFO = "chain-info"
    CHAIN_LOGO = "chain-logo"
    TOKEN_LIST = "token-list"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class AssetFile:
    """One addressable registry item handed to the fixers.

    Immutable: a fixer that moves the backing file returns a new AssetFile
    (see rebind) and the caller must continue with that value.

    asset is the native coin marker "" for chain-level files, otherwise the
    token id or contract address as spelled in the directory name.
    """

    chain: Chain
    asset: str
    path: Path
    kind: FileKind = FileKind.UNKNOWN

    def rebind(self, path: Path, *, asset: Optional[str] = None) -> "AssetFile":
        """Return a copy pointing at a new path (and optionally a new asset id)."""
        return replace(self, path=Path(path), asset=self.asset if asset is None else asset)

    @property
    def name(self) -> str:
        return Path(self.path).name


def classify(layout: RegistryLayout, path: str | Path) -> Optional[AssetFile]:
    """Map a path under the registry root to an AssetFile.

    Returns None for paths outside blockchains/<known chain>/.
    Unrecognized files inside a chain directory get FileKind.UNKNOWN.
    """

    p = Path(path)
    try:
        rel = p.relative_to(layout.blockchains_dir)
    except ValueError:
        return None

    parts = rel.parts
    if not parts:
        return None

    chain = try_chain_by_handle(parts[0])
    if chain is None:
        return None

    rest = parts[1:]
    kind = FileKind.UNKNOWN
    asset = ""

    if rest == (layout.TOKENLIST_FILE,) or rest == (layout.TOKENLIST_EXTENDED_FILE,):
        kind = FileKind.TOKEN_LIST
    elif rest == (layout.INFO_DIR, layout.INFO_FILE):
        kind = FileKind.CHAIN_INFO
    elif rest == (layout.INFO_DIR, layout.LOGO_FILE):
        kind = FileKind.CHAIN_LOGO
    elif len(rest) >= 2 and rest[0] == layout.ASSETS_DIR:
        asset = rest[1]
        if len(rest) == 2:
            kind = FileKind.ASSET_FOLDER
        elif rest[2:] == (layout.INFO_FILE,):
            kind = FileKind.ASSET_INFO
        elif rest[2:] == (layout.LOGO_FILE,):
            kind = FileKind.ASSET_LOGO

    return AssetFile(chain=chain, asset=asset, path=p, kind=kind)
