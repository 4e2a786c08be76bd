from __future__ import annotations

import logging
from typing import Optional

from regnorm.core.config import ReconcileConfig
from regnorm.core.files import AssetFile, format_json_file
from regnorm.core.runtime.context import FixContext
from regnorm.core.runtime.events import DocumentRewrittenEvent

log = logging.getLogger("regnorm.fixers")


def fix_json(
    file: AssetFile,
    *,
    config: Optional[ReconcileConfig] = None,
    context: Optional[FixContext] = None,
) -> AssetFile:
    """Re-serialize a JSON file in canonical pretty form when it differs."""

    cfg = config or ReconcileConfig()
    if format_json_file(file.path, indent=cfg.json_indent):
        log.debug("Formatted JSON", extra={"path": str(file.path)})
        if context is not None:
            context.emit_event(
                DocumentRewrittenEvent(
                    chain=file.chain.handle,
                    path=str(file.path),
                    fixer="json",
                )
            )
    return file
