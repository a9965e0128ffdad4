"""
Logging and diagnostics.
"""

from .logger import configure_logging, get_logger, log_operation, setup_logger
from .messages import CollectingMessageSink, LoggingMessageSink, MessageSink

__all__ = [
    "setup_logger",
    "configure_logging",
    "get_logger",
    "log_operation",
    "MessageSink",
    "LoggingMessageSink",
    "CollectingMessageSink",
]
