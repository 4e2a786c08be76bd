from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Tuple

from regnorm.core.config import ReconcileConfig
from regnorm.core.errors import RegistryError, RegistryIOError
from regnorm.core.files import AssetFile, FileKind
from regnorm.core.runtime.context import FixContext
from regnorm.core.runtime.events import FixFailedEvent

from .asset_info import fix_asset_info
from .chain_info import fix_chain_info
from .checksum import fix_address_checksum
from .json_format import fix_json
from .logo import fix_logo
from .token_list import fix_token_list

log = logging.getLogger("regnorm.fixers")

Fixer = Callable[..., AssetFile]

FIXERS_BY_KIND: Dict[FileKind, Tuple[Tuple[str, Fixer], ...]] = {
    FileKind.ASSET_FOLDER: (("address-checksum", fix_address_checksum),),
    FileKind.CHAIN_INFO: (("json", fix_json), ("chain-info", fix_chain_info)),
    FileKind.ASSET_INFO: (("json", fix_json), ("asset-info", fix_asset_info)),
    FileKind.CHAIN_LOGO: (("logo", fix_logo),),
    FileKind.ASSET_LOGO: (("logo", fix_logo),),
    FileKind.TOKEN_LIST: (("token-list", fix_token_list),),
}


@dataclass
class FixerService:
    """Applies the fixer chain registered for a file's kind.

    Fixers for one file run strictly in sequence; each returns the AssetFile
    the next one must use, which is how a rename propagates.
    """

    config: ReconcileConfig = field(default_factory=ReconcileConfig)
    context: Optional[FixContext] = None

    def fixers_for(self, file: AssetFile) -> Tuple[Tuple[str, Fixer], ...]:
        return FIXERS_BY_KIND.get(file.kind, ())

    def run(self, file: AssetFile) -> AssetFile:
        """Run every fixer for file and return the (possibly rebound) file.

        Raises the first RegistryError encountered, after recording it.
        """

        current = file
        for name, fixer in self.fixers_for(file):
            try:
                current = fixer(current, config=self.config, context=self.context)
            except RegistryError as e:
                log.error(
                    "Fixer failed",
                    extra={"fixer": name, "path": str(current.path), "error": str(e)},
                )
                if self.context is not None:
                    self.context.emit_event(
                        FixFailedEvent(
                            chain=current.chain.handle,
                            path=str(current.path),
                            fixer=name,
                            error=str(e),
                            operation=e.operation if isinstance(e, RegistryIOError) else None,
                        )
                    )
                raise
        return current
