from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from regnorm.core.config import ReconcileConfig
from regnorm.core.errors import RegistryIOError
from regnorm.core.files import (
    AssetFile,
    AssetInfoModel,
    RegistryLayout,
    TokenItemModel,
    TokenListModel,
    read_document,
    write_json,
)
from regnorm.core.registry import COIN_TYPE
from regnorm.core.runtime.context import FixContext
from regnorm.core.runtime.events import TokenListFilteredEvent

log = logging.getLogger("regnorm.fixers")

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%f"


def referenced_descriptor_path(
    layout: RegistryLayout, file: AssetFile, item: TokenItemModel
) -> Path:
    """Descriptor a token-list entry points at.

    Coin entries point at the chain descriptor, token entries at the asset
    descriptor named by their address.
    """

    if item.type == COIN_TYPE:
        return layout.chain_info_path(file.chain.handle)
    if not item.address:
        raise RegistryIOError(str(file.path), "resolve", "token entry has no address")
    return layout.asset_info_path(file.chain.handle, item.address)


def _bumped_version(raw_version: Any) -> Dict[str, Any]:
    old = raw_version if isinstance(raw_version, dict) else {}
    major = old.get("major")
    major = major if isinstance(major, int) else 0
    return {**old, "major": major + 1, "minor": 0, "patch": 0}


def fix_token_list(
    file: AssetFile,
    *,
    config: Optional[ReconcileConfig] = None,
    context: Optional[FixContext] = None,
) -> AssetFile:
    """Drop manifest entries whose referenced descriptor is not active.

    Every referenced descriptor is re-read on each call, resolved relative to
    the manifest itself. Retained entries keep
    their original order and their original JSON. The manifest is rewritten
    only if something was dropped; any unreadable descriptor aborts the pass
    before anything is written.
    """

    cfg = config or ReconcileConfig()
    layout = RegistryLayout.from_chain_file(file.path)

    doc = read_document(file.path, TokenListModel)
    raw_tokens: List[Any] = doc.raw.get("tokens") or []

    kept: List[Any] = []
    dropped: List[str] = []
    for raw_item, item in zip(raw_tokens, doc.model.tokens):
        info_path = referenced_descriptor_path(layout, file, item)
        info = read_document(info_path, AssetInfoModel).model
        if not info.is_active:
            dropped.append(item.address or item.asset or str(info_path))
            continue
        kept.append(raw_item)

    if not dropped:
        return file

    out = dict(doc.raw)
    out["tokens"] = kept
    out["timestamp"] = datetime.now(timezone.utc).strftime(TIMESTAMP_FORMAT)
    out["version"] = _bumped_version(doc.raw.get("version"))
    write_json(file.path, out, indent=cfg.json_indent)

    log.debug(
        "Filtered token list",
        extra={"path": str(file.path), "kept": len(kept), "dropped": len(dropped)},
    )
    if context is not None:
        context.emit_event(
            TokenListFilteredEvent(
                chain=file.chain.handle,
                path=str(file.path),
                kept=len(kept),
                dropped=dropped,
            )
        )
    return file
