"""
Structured logging for the portfolio app

Records carry an optional ``event`` block describing what the visitor did: chat
activity (``chat.*``), contact form submissions (``contact.*``) and content loading
(``content.*``). Everything else passed through ``extra`` lands under ``extra``.
"""

import json
import logging
import logging.handlers
import time
import traceback
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional
import streamlit as st

from config.app_config import AppConfig, get_config


# Keys lifted out of ``extra`` into the event block
EVENT_FIELDS = ("event", "session_id", "message_id", "content_file", "section")

_RECORD_ATTRIBUTES = set(vars(logging.makeLogRecord({}))) | {"message", "asctime"}

# Chatty libraries that Streamlit pulls in
_QUIET_LOGGERS = ("watchdog", "urllib3", "PIL")


class StructuredFormatter(logging.Formatter):
    """
    One JSON object per record, with portfolio events grouped under ``event``
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}.{record.funcName}:{record.lineno}",
        }

        custom = {
            key: value for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRIBUTES
        }

        event = {key: custom.pop(key) for key in EVENT_FIELDS if key in custom}
        if event:
            log_data["event"] = event
        if custom:
            log_data["extra"] = custom

        if record.exc_info and record.exc_info[0]:
            error_type, error, tb = record.exc_info
            log_data["exception"] = {
                "type": error_type.__name__,
                "message": str(error),
                "traceback": traceback.format_exception(error_type, error, tb),
            }

        return json.dumps(log_data, ensure_ascii=False, default=str)


class StreamlitToastHandler(logging.Handler):
    """
    Shows warnings and errors as page toasts while developing
    """

    def emit(self, record: logging.LogRecord):
        try:
            icon = "🚨" if record.levelno >= logging.ERROR else "⚠️"
            text = record.getMessage()
            content_file = getattr(record, "content_file", None)
            if content_file:
                text = f"{text} ({content_file})"
            st.toast(text, icon=icon)
        except Exception:
            self.handleError(record)


def _console_handler(config: AppConfig) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(config.logging.level)
    if config.debug:
        handler.setFormatter(logging.Formatter(config.logging.format))
    else:
        handler.setFormatter(StructuredFormatter())
    return handler


def _file_handler(config: AppConfig) -> logging.Handler:
    log_file = Path(config.logging.log_file)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=5*1024*1024,  # 5MB
        backupCount=3,
        encoding="utf-8",
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(StructuredFormatter())
    return handler


def setup_logging(config: Optional[AppConfig] = None) -> logging.Logger:
    """
    Configure the root logger from the app config

    Args:
        config: Configuration to apply; defaults to the global one

    Returns:
        logging.Logger: Configured root logger
    """
    config = config or get_config()

    root_logger = logging.getLogger()
    root_logger.setLevel(config.logging.level)
    root_logger.handlers.clear()
    root_logger.addHandler(_console_handler(config))

    if config.logging.enable_file_logging:
        root_logger.addHandler(_file_handler(config))

    if config.debug and config.environment == "development":
        toast_handler = StreamlitToastHandler()
        toast_handler.setLevel(logging.WARNING)
        root_logger.addHandler(toast_handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


@contextmanager
def log_content_load(logger: logging.Logger, section: str):
    """
    Time loading of one content section

    Failures are logged with the offending file when the error names one, then
    re-raised.
    """
    started = time.perf_counter()
    logger.debug(f"Loading {section} content", extra={"event": "content.load_started", "section": section})

    try:
        yield
    except Exception as e:
        logger.error(f"Failed to load {section} content: {e}", extra={
            "event": "content.load_failed",
            "section": section,
            "content_file": getattr(e, "filename", None),
            "duration_ms": round((time.perf_counter() - started) * 1000, 1),
        }, exc_info=True)
        raise

    logger.info(f"Loaded {section} content", extra={
        "event": "content.loaded",
        "section": section,
        "duration_ms": round((time.perf_counter() - started) * 1000, 1),
    })


def log_chat_event(logger: logging.Logger, event_type: str, session_id: str, **details):
    """
    Log chat session activity

    Args:
        logger: Logger instance
        event_type: e.g. "user_message", "owner_reply", "opened", "disposed"
        session_id: Chat session identifier
        **details: Additional fields such as message_id
    """
    logger.info(f"Chat {event_type.replace('_', ' ')}", extra={
        "event": f"chat.{event_type}",
        "session_id": session_id,
        **details
    })


def log_contact_event(logger: logging.Logger, event_type: str, **details):
    """
    Log contact form activity

    The visitor's message body is never logged; callers pass sizes or flags.
    """
    level = logging.WARNING if event_type == "failed" else logging.INFO
    logger.log(level, f"Contact form {event_type}", extra={
        "event": f"contact.{event_type}",
        **details
    })


class ErrorTracker:
    """
    Counts errors per context and logs each occurrence
    """

    def __init__(self, logger: logging.Logger):
        self.logger = logger
        self.error_counts: Dict[str, int] = {}

    def track_error(self, error: Exception, context: str, **extra_info):
        """
        Log an error raised while rendering part of the page

        Args:
            error: Exception that occurred
            context: Where it happened, e.g. "content_loading"
            **extra_info: Additional fields such as content_file
        """
        key = f"{type(error).__name__}:{context}"
        count = self.error_counts.get(key, 0) + 1
        self.error_counts[key] = count

        self.logger.error(f"Error in {context}: {error}", extra={
            "event": f"error.{context}",
            "error_type": type(error).__name__,
            "occurrence": count,
            **extra_info
        }, exc_info=error)


_logger_setup = False
_error_tracker: Optional[ErrorTracker] = None


def initialize_logging() -> ErrorTracker:
    """
    Configure logging once per process and return the error tracker
    """
    global _logger_setup, _error_tracker

    if not _logger_setup:
        setup_logging()
        _logger_setup = True

    if _error_tracker is None:
        _error_tracker = ErrorTracker(logging.getLogger("portfolio"))

    return _error_tracker
