"""
Progress Channel - session-keyed fan-out of search status updates.

The request layer owns one channel and hands a ProgressReporter bound to a
session id to the Search Driver. Listeners subscribe per session and receive
every event published for it until the session is closed or they disconnect.

Usage:
    channel = ProgressChannel()
    q = channel.subscribe(session_id)
    reporter = channel.reporter(session_id, total_steps=9)
    reporter.step("Launching browser...")
    channel.close(session_id)
"""

import logging
import queue
import threading
from typing import Dict, Iterator, List, Optional, Set, Union

from .models import ProgressEvent

logger = logging.getLogger(__name__)

# Marks the end of a session's stream
_CLOSED = object()

KEEPALIVE = "keepalive"


class ProgressChannel:
    """Thread-safe table of per-session subscriber queues"""

    def __init__(self):
        self._subscribers: Dict[str, List[queue.Queue]] = {}
        self._running: Set[str] = set()
        self._lock = threading.Lock()

    def start(self, session_id: str) -> bool:
        """Mark a run as in flight for a session; False if one already is"""
        with self._lock:
            if session_id in self._running:
                return False
            self._running.add(session_id)
        return True

    def is_running(self, session_id: str) -> bool:
        with self._lock:
            return session_id in self._running

    def subscribe(self, session_id: str) -> queue.Queue:
        q: queue.Queue = queue.Queue()
        with self._lock:
            self._subscribers.setdefault(session_id, []).append(q)
        logger.debug(f"Subscriber attached to session {session_id}")
        return q

    def unsubscribe(self, session_id: str, q: queue.Queue) -> None:
        with self._lock:
            queues = self._subscribers.get(session_id)
            if not queues:
                return
            if q in queues:
                queues.remove(q)
            if not queues:
                del self._subscribers[session_id]
        logger.debug(f"Subscriber detached from session {session_id}")

    def has_subscribers(self, session_id: str) -> bool:
        with self._lock:
            return bool(self._subscribers.get(session_id))

    def publish(self, event: ProgressEvent) -> int:
        """Deliver an event to every subscriber of its session; returns the count"""
        with self._lock:
            queues = list(self._subscribers.get(event.session_id, ()))
        for q in queues:
            q.put(event)
        return len(queues)

    def close(self, session_id: str) -> None:
        """End the stream for every subscriber of a session"""
        with self._lock:
            self._running.discard(session_id)
            queues = self._subscribers.pop(session_id, [])
        for q in queues:
            q.put(_CLOSED)

    def listen(
        self,
        session_id: str,
        q: queue.Queue,
        keepalive: Optional[float] = None,
    ) -> Iterator[Union[ProgressEvent, str]]:
        """
        Yield events from a subscription until the session closes.

        When `keepalive` is set, KEEPALIVE is yielded after that many idle
        seconds so the caller can keep the connection open. The subscription
        is always released on exit, including when the consumer stops early.
        """
        try:
            while True:
                try:
                    item = q.get(timeout=keepalive)
                except queue.Empty:
                    yield KEEPALIVE
                    continue
                if item is _CLOSED:
                    return
                yield item
        finally:
            self.unsubscribe(session_id, q)

    def reporter(self, session_id: str, total_steps: int) -> "ProgressReporter":
        return ProgressReporter(self, session_id, total_steps)


class ProgressReporter:
    """Publishes numbered steps for a single session"""

    def __init__(self, channel: ProgressChannel, session_id: str, total_steps: int):
        self.channel = channel
        self.session_id = session_id
        self.total_steps = total_steps
        self.current_step = 0

    def _emit(self, message: str, step: int) -> ProgressEvent:
        event = ProgressEvent(
            session_id=self.session_id,
            message=message,
            step=step,
            total_steps=self.total_steps,
        )
        self.channel.publish(event)
        return event

    def step(self, message: str) -> ProgressEvent:
        self.current_step += 1
        return self._emit(message, self.current_step)

    def complete(self, message: str) -> ProgressEvent:
        self.current_step = max(self.current_step + 1, self.total_steps)
        return self._emit(message, self.current_step)

    def fail(self, message: str) -> ProgressEvent:
        return self._emit(message, -1)
