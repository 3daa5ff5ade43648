"""State-change notifications for the presentation layer.

Listeners receive a StateChanged after a mutation has been committed.
Invocation order is not guaranteed and callers must not rely on it.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from datetime import datetime, timezone

from app.core.enums import StateChangeKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StateChanged:
    kind: StateChangeKind
    revision: int
    at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


Listener = Callable[[StateChanged], Awaitable[None] | None]


class EventBus:
    """Publish/subscribe hub with a monotonically increasing revision counter."""

    def __init__(self) -> None:
        self._listeners: set[Listener] = set()
        self._revision = 0

    @property
    def revision(self) -> int:
        return self._revision

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a callable that unsubscribes it."""
        self._listeners.add(listener)
        return lambda: self.unsubscribe(listener)

    def unsubscribe(self, listener: Listener) -> None:
        self._listeners.discard(listener)

    async def publish(self, kind: StateChangeKind) -> StateChanged:
        self._revision += 1
        event = StateChanged(kind=StateChangeKind(kind), revision=self._revision)
        for listener in list(self._listeners):
            try:
                result = listener(event)
                if inspect.isawaitable(result):
                    await result
            except Exception:
                # One broken listener must not keep the others from hearing about the change
                logger.exception("State listener %r failed on %s", listener, event.kind.value)
        return event


event_bus = EventBus()


def get_event_bus() -> EventBus:
    """Dependency returning the process-wide bus."""
    return event_bus
