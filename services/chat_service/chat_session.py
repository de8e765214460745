"""
Chat session service - open/closed state, message history and delayed auto-replies.
"""

from datetime import datetime
from typing import Dict, Iterable, Optional, Tuple
import threading
import uuid

from services.chat_service.models import ChatMessage, Clock, Sender
from services.chat_service.reply_rules import ReplyMatcher
from services.chat_service.scheduling import ReplyScheduler, ScheduledHandle, ThreadingReplyScheduler
from utils.logging_config import get_logger, log_chat_event

DEFAULT_REPLY_DELAY = 1.0


class ChatSession:
    """
    In-memory chat between a visitor and the simulated owner.

    History is append-only and kept in insertion order. Every accepted user message
    schedules exactly one owner reply after ``reply_delay`` seconds, whether or not
    the widget is open at that moment. After ``dispose()`` pending replies are
    cancelled, and any that still fire are dropped.
    """

    def __init__(self, matcher: ReplyMatcher,
                 scheduler: Optional[ReplyScheduler] = None,
                 reply_delay: float = DEFAULT_REPLY_DELAY,
                 seed_messages: Iterable[ChatMessage] = (),
                 clock: Clock = datetime.now):
        self.logger = get_logger(__name__)
        self.session_id = uuid.uuid4().hex[:8]
        self.matcher = matcher
        self.scheduler = scheduler or ThreadingReplyScheduler()
        self.reply_delay = reply_delay
        self.clock = clock
        self.is_open = False

        self._messages = list(seed_messages)
        self._lock = threading.Lock()
        self._lifecycle_token: Optional[object] = object()
        self._pending: Dict[int, ScheduledHandle] = {}
        self._next_ticket = 0

    @property
    def messages(self) -> Tuple[ChatMessage, ...]:
        with self._lock:
            return tuple(self._messages)

    @property
    def is_disposed(self) -> bool:
        return self._lifecycle_token is None

    @property
    def pending_replies(self) -> int:
        with self._lock:
            return len(self._pending)

    def open(self):
        self.is_open = True

    def close(self):
        self.is_open = False

    def toggle(self):
        self.is_open = not self.is_open

    def send_user_message(self, text: str) -> Optional[ChatMessage]:
        """
        Append a visitor message and schedule the owner's reply.

        Blank or whitespace-only text is ignored and returns None.
        """
        content = text.strip()
        if not content or self.is_disposed:
            return None

        message = ChatMessage(content=content, sender=Sender.USER, timestamp=self.clock())
        with self._lock:
            self._messages.append(message)

        log_chat_event(self.logger, "user_message", self.session_id, message_id=message.id)
        self.schedule_reply(content)
        return message

    def schedule_reply(self, user_text: str):
        """Queue one owner reply to ``user_text`` after the reply delay"""
        token = self._lifecycle_token
        if token is None:
            return

        with self._lock:
            ticket = self._next_ticket
            self._next_ticket += 1
            # Registered before the scheduler can possibly fire the callback
            self._pending[ticket] = _UNSET_HANDLE

        def deliver():
            self._deliver_reply(token, ticket, user_text)

        handle = self.scheduler.call_later(self.reply_delay, deliver)
        with self._lock:
            if ticket in self._pending:
                self._pending[ticket] = handle

    def _deliver_reply(self, token: object, ticket: int, user_text: str):
        with self._lock:
            self._pending.pop(ticket, None)
        if token is not self._lifecycle_token:
            self.logger.debug(f"Dropped reply for disposed chat session {self.session_id}")
            return

        reply = ChatMessage(
            content=self.matcher.match(user_text),
            sender=Sender.OWNER,
            timestamp=self.clock(),
        )
        with self._lock:
            if token is not self._lifecycle_token:
                return
            self._messages.append(reply)

        log_chat_event(self.logger, "owner_reply", self.session_id, message_id=reply.id)

    def dispose(self):
        """Cancel pending replies and stop accepting appends"""
        with self._lock:
            self._lifecycle_token = None
            pending = list(self._pending.values())
            self._pending.clear()

        for handle in pending:
            handle.cancel()

        log_chat_event(self.logger, "disposed", self.session_id, cancelled_replies=len(pending))


class _UnsetHandle:
    def cancel(self) -> None:
        pass


_UNSET_HANDLE = _UnsetHandle()
