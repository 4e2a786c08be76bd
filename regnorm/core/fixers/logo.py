from __future__ import annotations

import logging
from typing import Optional

from regnorm.core.config import ReconcileConfig
from regnorm.core.derivation import target_dimensions
from regnorm.core.files import AssetFile, file_size, png_dimensions, resize_png
from regnorm.core.runtime.context import FixContext
from regnorm.core.runtime.events import LogoOversizedEvent, LogoResizedEvent

log = logging.getLogger("regnorm.fixers")


def fix_logo(
    file: AssetFile,
    *,
    config: Optional[ReconcileConfig] = None,
    context: Optional[FixContext] = None,
) -> AssetFile:
    """Scale down a logo whose width or height exceeds the edge limit.

    After the (optional) resize the byte size is checked. An oversized file
    is reported as LogoOversizedEvent and a warning, never as an error:
    there is no compression step.

    Raises
    - RegistryIOError: the image cannot be probed or resized.
    """

    cfg = config or ReconcileConfig()
    max_edge = cfg.logo_max_edge

    width, height = png_dimensions(file.path)

    if width > max_edge or height > max_edge:
        target_w, target_h = target_dimensions(width, height, max_edge)
        log.debug("Fixing too large image", extra={"path": str(file.path)})
        resize_png(file.path, target_w, target_h)
        if context is not None:
            context.emit_event(
                LogoResizedEvent(
                    chain=file.chain.handle,
                    path=str(file.path),
                    from_size=[width, height],
                    to_size=[target_w, target_h],
                )
            )

    size = file_size(file.path)
    if size > cfg.logo_max_bytes:
        # TODO: compress logos that stay above logo_max_bytes after resizing.
        log.warning(
            "Logo exceeds size limit",
            extra={"path": str(file.path), "size_bytes": size, "max_bytes": cfg.logo_max_bytes},
        )
        if context is not None:
            context.emit_event(
                LogoOversizedEvent(
                    chain=file.chain.handle,
                    path=str(file.path),
                    size_bytes=size,
                    max_bytes=cfg.logo_max_bytes,
                )
            )

    return file
