from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime, timezone
from threading import Lock
from typing import Dict, List, Optional, Tuple, Type

from .events import FixEvent


@dataclass
class FixContext:
    """
    Append-only ledger of the corrections made during one reconciliation run.

    Fixers emit one event per applied change. Stages for distinct entities may
    run on different threads, so appends are guarded by a lock.
    """

    context_id: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation_name: Optional[str] = None

    _events: List[FixEvent] = field(default_factory=list, init=False, repr=False)
    _lock: Lock = field(default_factory=Lock, init=False, repr=False)

    def emit_event(self, event: FixEvent) -> "FixContext":
        """
        Append an event.

        Raises
        - TypeError: if event is not a FixEvent.
        """

        if not isinstance(event, FixEvent):
            raise TypeError("Only FixEvent instances may be emitted")

        with self._lock:
            self._events.append(event)

        return self

    def get_events(self) -> Tuple[FixEvent, ...]:
        """
        Return an immutable snapshot of recorded events in order.
        """

        with self._lock:
            return tuple(self._events)

    def events_of(self, event_cls: Type[FixEvent]) -> Tuple[FixEvent, ...]:
        with self._lock:
            return tuple(e for e in self._events if isinstance(e, event_cls))

    def summary(self) -> Dict[str, int]:
        """Event counts by event type."""

        with self._lock:
            return dict(Counter(e.event_type for e in self._events))
