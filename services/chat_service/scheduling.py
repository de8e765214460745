"""
Delayed-callback scheduling for chat auto-replies.

Anything exposing ``call_later(delay, callback) -> handle`` where the handle has
``cancel()`` can drive a ChatSession; an asyncio event loop already qualifies.
"""

import threading
from typing import Callable, Protocol


class ScheduledHandle(Protocol):
    def cancel(self) -> None:
        ...


class ReplyScheduler(Protocol):
    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledHandle:
        ...


class ThreadingReplyScheduler:
    """Runs each callback on its own daemon timer thread"""

    def call_later(self, delay: float, callback: Callable[[], None]) -> threading.Timer:
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        timer.start()
        return timer
