from __future__ import annotations

import logging
from typing import Optional

from regnorm.core.config import ReconcileConfig
from regnorm.core.files import AssetFile, ChainInfoModel, read_document, write_document
from regnorm.core.registry import COIN_TYPE
from regnorm.core.runtime.context import FixContext
from regnorm.core.runtime.events import DocumentRewrittenEvent

log = logging.getLogger("regnorm.fixers")


def fix_chain_info(
    file: AssetFile,
    *,
    config: Optional[ReconcileConfig] = None,
    context: Optional[FixContext] = None,
) -> AssetFile:
    """Force a chain descriptor's "type" to the native-coin tag.

    The file is rewritten only when the tag is missing or different.
    """

    cfg = config or ReconcileConfig()
    doc = read_document(file.path, ChainInfoModel)

    if doc.model.type == COIN_TYPE:
        return file

    doc.model.type = COIN_TYPE
    write_document(doc, indent=cfg.json_indent)

    log.debug("Fixed chain info type", extra={"path": str(file.path)})
    if context is not None:
        context.emit_event(
            DocumentRewrittenEvent(
                chain=file.chain.handle,
                path=str(file.path),
                fixer="chain-info",
                changed_fields=["type"],
            )
        )
    return file
