"""Execution trace for arrows - opt-in evidence of what ran.

Trace is runtime infrastructure. It is never consulted by the arrows
themselves, so a traced pipeline computes exactly what the untraced one
does. Tree relationships are rebuilt on demand via as_tree().
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any


@dataclass(frozen=True)
class Evidence:
    """A single recorded event.

    Attributes:
        action: What happened ("call_begin", "sample", "law_end", ...)
        id: Sequential id within the owning trace
        parent_id: Id of the enclosing event, if any
        timestamp: When the event was recorded (UTC)
        info: Event details
        duration_ms: Elapsed time for events that close a span
    """

    action: str
    id: int = 0
    parent_id: int | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    info: dict[str, Any] = field(default_factory=dict)
    duration_ms: float | None = None


class Trace:
    """Stack-nested event recorder.

    Not synchronised: use one trace per thread.
    A disabled trace costs a single flag check per record().
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._events: list[Evidence] = []
        self._next_id: int = 0
        self._stack: list[int] = []

    def push(self, event_id: int) -> None:
        """Make event_id the implicit parent of subsequent records."""
        self._stack.append(event_id)

    def pop(self) -> int | None:
        """Drop the innermost parent; returns it, or None if the stack is empty."""
        if self._stack:
            return self._stack.pop()
        return None

    def record(
        self,
        action: str,
        info: dict[str, Any] | None = None,
        parent_id: int | None = None,
        duration_ms: float | None = None,
    ) -> int | None:
        """Record an event.

        Args:
            action: Event name
            info: Additional context
            parent_id: Explicit parent; defaults to the top of the stack
            duration_ms: Elapsed time, for span-closing events

        Returns:
            The new event id, or None if tracing is disabled
        """
        if not self.enabled:
            return None

        if parent_id is None and self._stack:
            parent_id = self._stack[-1]

        event_id = self._next_id
        self._next_id += 1
        self._events.append(
            Evidence(
                action=action,
                id=event_id,
                parent_id=parent_id,
                timestamp=datetime.now(UTC),
                info=info or {},
                duration_ms=duration_ms,
            )
        )
        return event_id

    def get_events(self) -> list[Evidence]:
        return list(self._events)

    def find(self, action: str | None = None, **info: Any) -> list[Evidence]:
        """Return events with the given action whose info contains every given item."""
        return [
            ev
            for ev in self._events
            if (action is None or ev.action == action)
            and all(k in ev.info and ev.info[k] == v for k, v in info.items())
        ]

    def as_tree(self) -> dict[int | None, list[int]]:
        """Map each parent id (None for roots) to its child ids, in record order."""
        tree: dict[int | None, list[int]] = {}
        for ev in self._events:
            tree.setdefault(ev.parent_id, []).append(ev.id)
        return tree

    def __len__(self) -> int:
        return len(self._events)

