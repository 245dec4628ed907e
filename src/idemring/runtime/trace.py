"""Verification trace - a flat evidence log of what a run checked.

The trace never influences outcomes. Events are recorded in order; nesting
(run > identity > violation) is kept through parent ids.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Literal

Action = Literal["run", "identity", "violation", "skipped"]


@dataclass(frozen=True)
class Evidence:
    """
    One recorded verifier event.

    Attributes:
        action: What happened
        identity: The identity (or axiom) concerned, None for a run
        operands: Operand reprs of a violation
        detail: Free text, e.g. the skip reason or the ring of a run
    """

    action: Action
    id: int = 0
    parent_id: int | None = None
    identity: str | None = None
    operands: tuple[str, ...] = ()
    detail: str = ""
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))


class Trace:
    """Append-only evidence log. Each verifier run owns a fresh one."""

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._events: list[Evidence] = []
        self._open: list[int] = []

    def record(
        self,
        action: Action,
        identity: str | None = None,
        operands: tuple[str, ...] = (),
        detail: str = "",
    ) -> int | None:
        """Record an event under the innermost open scope.

        Returns:
            Event ID, or None if tracing is disabled
        """
        if not self.enabled:
            return None
        event = Evidence(
            action=action,
            id=len(self._events),
            parent_id=self._open[-1] if self._open else None,
            identity=identity,
            operands=operands,
            detail=detail,
        )
        self._events.append(event)
        return event.id

    @contextmanager
    def scope(self, action: Action, identity: str | None = None, detail: str = "") -> Iterator[int | None]:
        """Record an event and nest every event recorded inside the block under it."""
        event_id = self.record(action, identity=identity, detail=detail)
        if event_id is None:
            yield None
            return
        self._open.append(event_id)
        try:
            yield event_id
        finally:
            self._open.pop()

    def get_events(self) -> list[Evidence]:
        return list(self._events)

    def find_all(self, action: Action | None = None, identity: str | None = None) -> list[Evidence]:
        return [
            ev
            for ev in self._events
            if (action is None or ev.action == action) and (identity is None or ev.identity == identity)
        ]

    def children(self, event_id: int | None) -> list[Evidence]:
        return [ev for ev in self._events if ev.parent_id == event_id]

    def __len__(self) -> int:
        return len(self._events)

    def clear(self) -> None:
        self._events.clear()
        self._open.clear()
