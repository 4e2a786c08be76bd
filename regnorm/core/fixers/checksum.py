from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from regnorm.core.config import ReconcileConfig
from regnorm.core.derivation import checksum_of, is_checksum_form
from regnorm.core.errors import RegistryIOError
from regnorm.core.files import AssetFile
from regnorm.core.runtime.context import FixContext
from regnorm.core.runtime.events import AssetRenamedEvent

log = logging.getLogger("regnorm.fixers")


def fix_address_checksum(
    file: AssetFile,
    *,
    config: Optional[ReconcileConfig] = None,
    context: Optional[FixContext] = None,
) -> AssetFile:
    """Rename an EVM asset directory to the checksum form of its address.

    Non-EVM chains and directories already in checksum form are returned
    unchanged. Otherwise the directory is renamed and a new AssetFile bound
    to the new path is returned; the caller must continue with it.

    Raises
    - DerivationError: the directory name is not an address.
    - RegistryIOError: the rename failed.
    """

    if not file.chain.is_evm:
        return file

    old_path = Path(file.path)
    asset_dir = old_path.name
    if is_checksum_form(asset_dir):
        return file

    checksum = checksum_of(asset_dir)
    new_path = old_path.with_name(checksum)

    try:
        os.rename(old_path, new_path)
    except OSError as e:
        raise RegistryIOError(str(old_path), "rename", e.strerror or str(e)) from e

    log.debug(
        "Renamed asset",
        extra={"chain": file.chain.handle, "from": asset_dir, "to": checksum},
    )
    if context is not None:
        context.emit_event(
            AssetRenamedEvent(
                chain=file.chain.handle,
                path=str(old_path),
                old_name=asset_dir,
                new_name=checksum,
                new_path=str(new_path),
            )
        )

    return file.rebind(new_path, asset=checksum)
