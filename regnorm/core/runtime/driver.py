from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from regnorm.core.config import ReconcileConfig
from regnorm.core.errors import RegistryError
from regnorm.core.files import AssetFile, FileKind, RegistryLayout, classify
from regnorm.core.fixers.service import FixerService
from regnorm.core.registry import Chain, chain_by_handle, iter_chains

from .context import FixContext

log = logging.getLogger("regnorm.driver")


@dataclass
class DriverReport:
    processed: int = 0
    failures: List[Tuple[str, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


def _sorted_children(path: Path) -> List[Path]:
    if not path.is_dir():
        return []
    return sorted(path.iterdir(), key=lambda p: p.name)


@dataclass
class Driver:
    """Walks a registry checkout and feeds every file to the fixers.

    Runs in two phases. Asset folders are processed first, so renames have
    happened before any file underneath them is enumerated; then chain
    descriptors, logos, asset descriptors and finally token lists.

    A RegistryError aborts only the entity it was raised for.
    """

    config: ReconcileConfig
    context: Optional[FixContext] = None

    @property
    def layout(self) -> RegistryLayout:
        return RegistryLayout(self.config.root)

    def _chains(self, handles: Optional[Sequence[str]]) -> List[Chain]:
        if handles:
            return [chain_by_handle(h) for h in handles]
        return [c for c in iter_chains() if self.layout.chain_dir(c.handle).is_dir()]

    def iter_asset_folders(self, chain: Chain) -> Iterator[AssetFile]:
        for p in _sorted_children(self.layout.assets_dir(chain.handle)):
            if not p.is_dir():
                continue
            f = classify(self.layout, p)
            if f is not None and f.kind == FileKind.ASSET_FOLDER:
                yield f

    def iter_files(self, chain: Chain) -> Iterator[AssetFile]:
        layout = self.layout
        candidates: List[Path] = [
            layout.chain_info_path(chain.handle),
            layout.chain_logo_path(chain.handle),
        ]
        for asset_dir in _sorted_children(layout.assets_dir(chain.handle)):
            if asset_dir.is_dir():
                candidates.append(asset_dir / layout.INFO_FILE)
                candidates.append(asset_dir / layout.LOGO_FILE)
        candidates.append(layout.token_list_path(chain.handle))
        candidates.append(layout.token_list_path(chain.handle, extended=True))

        for p in candidates:
            if not p.is_file():
                continue
            f = classify(layout, p)
            if f is not None and f.kind != FileKind.UNKNOWN:
                yield f

    def _run_all(self, service: FixerService, files: Iterable[AssetFile], report: DriverReport) -> None:
        for f in files:
            try:
                service.run(f)
            except RegistryError as e:
                report.failures.append((str(f.path), str(e)))
            finally:
                report.processed += 1

    def run(self, chains: Optional[Sequence[str]] = None) -> DriverReport:
        service = FixerService(config=self.config, context=self.context)
        report = DriverReport()

        selected = self._chains(chains)
        for chain in selected:
            # Materialize before renaming so iteration does not race the rename.
            self._run_all(service, list(self.iter_asset_folders(chain)), report)
        for chain in selected:
            self._run_all(service, list(self.iter_files(chain)), report)

        log.info(
            "Reconciliation finished",
            extra={"processed": report.processed, "failed": len(report.failures)},
        )
        return report
