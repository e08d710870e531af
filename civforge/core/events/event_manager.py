"""
Event bus for decoupled communication.

Factories, upgrade chains and civilizations publish events here without
knowing who listens. Events wait in a FIFO queue and are delivered in
publication order when process_events() runs, so a whole demonstration can
be replayed into the combat log after it finishes.
"""

import threading
from collections import defaultdict, deque
from dataclasses import dataclass
from typing import Callable, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .events import GameEvent, EventType


@dataclass(frozen=True)
class QueuedEvent:
    """An event waiting for delivery, tagged with its publisher."""
    event: "GameEvent"
    source: str = "unknown"


EventSubscriber = Callable[["GameEvent"], None]
ErrorCallback = Callable[[str], None]


class EventManager:
    """FIFO publisher-subscriber bus keyed by EventType."""

    def __init__(self):
        self._subscribers: dict["EventType", list[EventSubscriber]] = defaultdict(list)
        self._queue: deque[QueuedEvent] = deque()

        self._published = 0
        self._delivered = 0
        self._failures = 0

        self._lock = threading.RLock()
        self._error_callback: Optional[ErrorCallback] = None

    def set_error_callback(self, callback: Optional[ErrorCallback]) -> None:
        """Receive one message per subscriber that raises during delivery."""
        self._error_callback = callback

    def subscribe(self, event_type: "EventType", subscriber: EventSubscriber) -> None:
        with self._lock:
            self._subscribers[event_type].append(subscriber)

    def publish(self, event: "GameEvent", source: Optional[str] = None) -> None:
        """Queue an event until the next process_events() call.

        Args:
            event: Event to deliver
            source: Publisher name, shown in subscriber error reports
        """
        with self._lock:
            self._queue.append(QueuedEvent(event, source or "unknown"))
            self._published += 1

    def process_events(self) -> int:
        """Deliver every queued event in publication order.

        Events published by subscribers while this runs stay queued for the
        next call.

        Returns:
            Number of events delivered
        """
        with self._lock:
            pending = list(self._queue)
            self._queue.clear()

        for queued in pending:
            self._deliver(queued)

        return len(pending)

    def _deliver(self, queued: QueuedEvent) -> None:
        with self._lock:
            subscribers = list(self._subscribers.get(queued.event.event_type, []))
            self._delivered += 1

        for subscriber in subscribers:
            try:
                subscriber(queued.event)
            except Exception as e:
                # Remaining subscribers still receive the event
                self._report_failure(queued, subscriber, e)

    def _report_failure(
        self, queued: QueuedEvent, subscriber: EventSubscriber, error: Exception
    ) -> None:
        with self._lock:
            self._failures += 1

        if self._error_callback is not None:
            name = getattr(subscriber, "__name__", "anonymous")
            self._error_callback(
                f"{type(queued.event).__name__} de {queued.source}: "
                f"assinante {name} falhou: {error}"
            )

    def get_statistics(self) -> dict[str, int]:
        with self._lock:
            return {
                "events_published": self._published,
                "events_delivered": self._delivered,
                "events_queued": len(self._queue),
                "subscriber_failures": self._failures,
                "subscribers_count": sum(len(subs) for subs in self._subscribers.values()),
            }
