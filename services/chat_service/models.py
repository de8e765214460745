"""
Chat service data models for the simulated chat widget.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Callable, FrozenSet, Iterable
import uuid


class Sender(str, Enum):
    """The two chat participants"""
    USER = "user"
    OWNER = "owner"


def new_message_id() -> str:
    return f"msg-{uuid.uuid4().hex}"


@dataclass(frozen=True)
class ChatMessage:
    """Individual message in the chat history"""
    content: str
    sender: Sender
    timestamp: datetime = field(default_factory=datetime.now)
    id: str = field(default_factory=new_message_id)

    def __post_init__(self):
        if not self.content:
            raise ValueError("Chat message content must not be empty")


@dataclass(frozen=True)
class CannedReplyRule:
    """Keyword rule: matches when the lowered message contains any keyword"""
    category: str
    keywords: FrozenSet[str]
    reply: str

    @classmethod
    def of(cls, category: str, keywords: Iterable[str], reply: str) -> 'CannedReplyRule':
        return cls(category, frozenset(k.lower() for k in keywords), reply)

    def matches(self, lowered_message: str) -> bool:
        return any(keyword in lowered_message for keyword in self.keywords)


Clock = Callable[[], datetime]
