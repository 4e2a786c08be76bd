"""Shared fixtures: a miniature on-disk registry built under tmp_path."""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest
from PIL import Image

from regnorm.core.config import ReconcileConfig
from regnorm.core.files import AssetFile, FileKind, RegistryLayout
from regnorm.core.registry import chain_by_handle


class RegistryBuilder:
    def __init__(self, root: Path) -> None:
        self.root = root
        self.layout = RegistryLayout(root)
        self.config = ReconcileConfig(root=root)

    def write_json(self, path: Path, data: Any) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, indent=4) + "\n", encoding="utf-8")
        return path

    def chain_info(self, handle: str, data: Optional[Dict[str, Any]] = None) -> AssetFile:
        body = data if data is not None else {"name": handle, "type": "coin", "status": "active"}
        p = self.write_json(self.layout.chain_info_path(handle), body)
        return AssetFile(chain=chain_by_handle(handle), asset="", path=p, kind=FileKind.CHAIN_INFO)

    def asset_dir(self, handle: str, asset: str) -> AssetFile:
        p = self.layout.asset_dir(handle, asset)
        p.mkdir(parents=True, exist_ok=True)
        return AssetFile(chain=chain_by_handle(handle), asset=asset, path=p, kind=FileKind.ASSET_FOLDER)

    def asset_info(self, handle: str, asset: str, data: Dict[str, Any]) -> AssetFile:
        p = self.write_json(self.layout.asset_info_path(handle, asset), data)
        return AssetFile(chain=chain_by_handle(handle), asset=asset, path=p, kind=FileKind.ASSET_INFO)

    def logo(self, handle: str, asset: str, size: tuple) -> AssetFile:
        p = self.layout.asset_logo_path(handle, asset)
        p.parent.mkdir(parents=True, exist_ok=True)
        Image.new("RGBA", size, (200, 30, 30, 255)).save(p, format="PNG")
        return AssetFile(chain=chain_by_handle(handle), asset=asset, path=p, kind=FileKind.ASSET_LOGO)

    def token_list(self, handle: str, tokens: List[Dict[str, Any]], **extra: Any) -> AssetFile:
        body = {
            "name": f"Registry: {handle}",
            "logoURI": "https://example.org/logo.png",
            "timestamp": "2024-01-01T00:00:00.000000",
            "tokens": tokens,
            "version": {"major": 3, "minor": 1, "patch": 0},
        }
        body.update(extra)
        p = self.write_json(self.layout.token_list_path(handle), body)
        return AssetFile(chain=chain_by_handle(handle), asset="", path=p, kind=FileKind.TOKEN_LIST)


@pytest.fixture
def registry(tmp_path: Path) -> RegistryBuilder:
    return RegistryBuilder(tmp_path)
