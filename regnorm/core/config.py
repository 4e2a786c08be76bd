from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

DEFAULT_LOGO_MAX_EDGE = 512
DEFAULT_LOGO_MAX_BYTES = 100 * 1024
DEFAULT_JSON_INDENT = 4


@dataclass(frozen=True, slots=True)
class ReconcileConfig:
    """Configuration for a reconciliation run.

    root is the registry checkout (the directory holding "blockchains/").
    logo_max_edge applies to both width and height.
    """

    root: Path = Path(".")
    logo_max_edge: int = DEFAULT_LOGO_MAX_EDGE
    logo_max_bytes: int = DEFAULT_LOGO_MAX_BYTES
    json_indent: int = DEFAULT_JSON_INDENT

    def with_root(self, root: str | Path) -> "ReconcileConfig":
        return replace(self, root=Path(root))


def _env_int(name: str, default: int) -> int:
    """Read a positive integer environment variable, falling back to default."""

    raw = os.environ.get(name, "").strip()
    if not raw:
        return int(default)
    try:
        value = int(raw)
    except ValueError:
        return int(default)
    return value if value > 0 else int(default)


def load_config(root: Optional[str | Path] = None) -> ReconcileConfig:
    """Build a ReconcileConfig from REGNORM_* environment variables.

    An explicit root wins over REGNORM_ROOT.
    """

    env_root = os.environ.get("REGNORM_ROOT", "").strip()
    resolved = Path(root) if root is not None else Path(env_root or ".")

    return ReconcileConfig(
        root=resolved,
        logo_max_edge=_env_int("REGNORM_LOGO_MAX_EDGE", DEFAULT_LOGO_MAX_EDGE),
        logo_max_bytes=_env_int("REGNORM_LOGO_MAX_BYTES", DEFAULT_LOGO_MAX_BYTES),
        json_indent=_env_int("REGNORM_JSON_INDENT", DEFAULT_JSON_INDENT),
    )
