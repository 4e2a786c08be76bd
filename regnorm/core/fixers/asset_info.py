from __future__ import annotations

import logging
from typing import List, Optional

from regnorm.core.config import ReconcileConfig
from regnorm.core.derivation import (
    explorer_url_of,
    resolve_chain_from_type_tag,
    resolve_token_type,
)
from regnorm.core.files import AssetFile, AssetInfoModel, read_document, write_document
from regnorm.core.runtime.context import FixContext
from regnorm.core.runtime.events import DocumentRewrittenEvent

log = logging.getLogger("regnorm.fixers")


def expected_asset_type(file: AssetFile, declared: str) -> str:
    """Registry token type for the file's chain+asset.

    Falls back to the upper-cased declared type when the registry has no
    entry; historical descriptors depend on that fallback.
    """

    tag, ok = resolve_token_type(file.chain.id, file.asset)
    if not ok:
        return declared.upper()
    return tag


def fix_asset_info(
    file: AssetFile,
    *,
    config: Optional[ReconcileConfig] = None,
    context: Optional[FixContext] = None,
) -> AssetFile:
    """Reconcile "type", "id" and "explorer" of an asset descriptor.

    All three checks run against the in-memory model; the document is written
    once, and only if at least one value changed.

    Raises
    - DerivationError: no explorer URL can be built for the asset.
    - RegistryIOError: the descriptor cannot be read or written.
    """

    cfg = config or ReconcileConfig()
    doc = read_document(file.path, AssetInfoModel)
    info = doc.model
    changed: List[str] = []

    declared = info.type or ""
    declared_chain = resolve_chain_from_type_tag(declared)
    expected_type = expected_asset_type(file, declared)
    if declared_chain.id != file.chain.id or declared.lower() != expected_type.lower():
        if info.type != expected_type:
            info.type = expected_type
            changed.append("type")

    if info.id != file.asset:
        info.id = file.asset
        changed.append("id")

    expected_explorer = explorer_url_of(file.chain, file.asset)
    if info.explorer is None or info.explorer.lower() != expected_explorer.lower():
        info.explorer = expected_explorer
        changed.append("explorer")

    if not changed:
        return file

    write_document(doc, indent=cfg.json_indent)

    log.debug("Fixed asset info", extra={"path": str(file.path), "fields": changed})
    if context is not None:
        context.emit_event(
            DocumentRewrittenEvent(
                chain=file.chain.handle,
                path=str(file.path),
                fixer="asset-info",
                changed_fields=changed,
            )
        )
    return file
