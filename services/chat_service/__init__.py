"""
Chat service - simulated chat with canned owner replies.
"""

from .models import ChatMessage, CannedReplyRule, Sender
from .reply_rules import DEFAULT_RULES, FALLBACK_REPLY, ReplyMatcher, first_match
from .scheduling import ReplyScheduler, ThreadingReplyScheduler
from .chat_session import ChatSession, DEFAULT_REPLY_DELAY

__all__ = [
    'ChatMessage',
    'CannedReplyRule',
    'Sender',
    'DEFAULT_RULES',
    'FALLBACK_REPLY',
    'ReplyMatcher',
    'first_match',
    'ReplyScheduler',
    'ThreadingReplyScheduler',
    'ChatSession',
    'DEFAULT_REPLY_DELAY'
]
