"""Path conventions for the on-disk asset registry.

Centralizes the layout so fixers, the driver and tests do not drift.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class RegistryLayout:
    """Builds registry paths relative to a checkout root."""

    root: Path

    BLOCKCHAINS_DIR = "blockchains"
    INFO_DIR = "info"
    ASSETS_DIR = "assets"
    INFO_FILE = "info.json"
    LOGO_FILE = "logo.png"
    TOKENLIST_FILE = "tokenlist.json"
    TOKENLIST_EXTENDED_FILE = "tokenlist-extended.json"

    @classmethod
    def from_chain_file(cls, path: str | Path) -> "RegistryLayout":
        """Layout for a file directly under blockchains/<chain>/ (e.g. a token list)."""
        return cls(root=Path(path).parents[2])

    @property
    def blockchains_dir(self) -> Path:
        return Path(self.root) / self.BLOCKCHAINS_DIR

    def chain_dir(self, handle: str) -> Path:
        return self.blockchains_dir / handle

    def chain_info_dir(self, handle: str) -> Path:
        return self.chain_dir(handle) / self.INFO_DIR

    def chain_info_path(self, handle: str) -> Path:
        return self.chain_info_dir(handle) / self.INFO_FILE

    def chain_logo_path(self, handle: str) -> Path:
        return self.chain_info_dir(handle) / self.LOGO_FILE

    def assets_dir(self, handle: str) -> Path:
        return self.chain_dir(handle) / self.ASSETS_DIR

    def asset_dir(self, handle: str, asset_id: str) -> Path:
        return self.assets_dir(handle) / asset_id

    def asset_info_path(self, handle: str, asset_id: str) -> Path:
        return self.asset_dir(handle, asset_id) / self.INFO_FILE

    def asset_logo_path(self, handle: str, asset_id: str) -> Path:
        return self.asset_dir(handle, asset_id) / self.LOGO_FILE

    def token_list_path(self, handle: str, *, extended: bool = False) -> Path:
        name = self.TOKENLIST_EXTENDED_FILE if extended else self.TOKENLIST_FILE
        return self.chain_dir(handle) / name
