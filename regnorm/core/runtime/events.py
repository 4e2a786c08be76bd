from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import UTC, datetime
from pathlib import Path
from typing import Any, Dict, List, Optional
from uuid import UUID, uuid4


def _json_safe(value: Any) -> Any:
    """Convert values into deterministic, JSON-safe representations."""

    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, (UUID, Path)):
        return str(value)
    if isinstance(value, dict):
        return {str(k): _json_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_safe(v) for v in value]
    if isinstance(value, (set, frozenset)):
        return sorted(_json_safe(v) for v in value)
    return value


@dataclass(frozen=True)
class FixEvent:
    """Immutable record of one correction (or soft finding) on a registry file.

    Every event names the chain handle and the path it concerns.
    """

    chain: str
    path: str

    event_id: UUID = field(default_factory=uuid4, init=False)
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC), init=False)

    @property
    def event_type(self) -> str:
        return self.__class__.__name__

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"event_type": self.event_type}
        for f in fields(self):
            payload[f.name] = _json_safe(getattr(self, f.name))
        return payload

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(event_id={self.event_id}, "
            f"chain={self.chain}, path={self.path})"
        )


@dataclass(frozen=True)
class AssetRenamedEvent(FixEvent):
    old_name: str = ""
    new_name: str = ""
    new_path: str = ""


@dataclass(frozen=True)
class LogoResizedEvent(FixEvent):
    """A logo exceeded the edge limit and was scaled down."""

    from_size: List[int] = field(default_factory=list)
    to_size: List[int] = field(default_factory=list)


@dataclass(frozen=True)
class LogoOversizedEvent(FixEvent):
    """Soft finding: logo bytes exceed the limit. Nothing is changed."""

    size_bytes: int = 0
    max_bytes: int = 0


@dataclass(frozen=True)
class DocumentRewrittenEvent(FixEvent):
    """A JSON descriptor was rewritten; changed_fields lists what changed."""

    fixer: str = ""
    changed_fields: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class TokenListFilteredEvent(FixEvent):
    kept: int = 0
    dropped: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class FixFailedEvent(FixEvent):
    fixer: str = ""
    error: str = ""
    operation: Optional[str] = None
