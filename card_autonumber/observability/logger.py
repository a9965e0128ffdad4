"""
Structured logging for card-autonumber

All log output goes to stderr: stdout is reserved for the rewritten deck,
which editors and formatter hosts read back verbatim.
"""
import logging
import os
import sys
import time

from pythonjsonlogger import jsonlogger

# Log level mapping
LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

DEFAULT_LOGGER_NAME = "card-autonumber"


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """
    JSON formatter that adds timestamp, level, logger and call-site fields
    """

    def add_fields(self, log_record: dict, record: logging.LogRecord, message_dict: dict) -> None:
        super().add_fields(log_record, record, message_dict)

        # Add timestamp
        if not log_record.get("timestamp"):
            log_record["timestamp"] = self.formatTime(record, self.datefmt)

        # Add level name
        if log_record.get("level"):
            log_record["level"] = log_record["level"].upper()
        else:
            log_record["level"] = record.levelname

        # Add logger name
        log_record["logger"] = record.name

        # Add module and function for debugging
        log_record["module"] = record.module
        log_record["function"] = record.funcName


def setup_logger(
    name: str = DEFAULT_LOGGER_NAME,
    level: str | None = None,
    format_type: str | None = None,
) -> logging.Logger:
    """
    Setup and configure a logger

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: "json" or "text" (falls back to LOG_FORMAT, then "text")

    Returns:
        Configured logger instance
    """
    # Get log level and format from parameters or environment
    log_level_str = level or os.getenv("LOG_LEVEL", "WARNING")
    log_level = LOG_LEVELS.get(log_level_str.upper(), logging.WARNING)
    format_type = format_type or os.getenv("LOG_FORMAT", "text")

    # Get or create logger
    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    # Create console handler on stderr; stdout carries the document
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)

    # Set formatter based on format type
    if format_type == "json":
        formatter = CustomJsonFormatter(
            fmt="%(timestamp)s %(level)s %(logger)s %(module)s %(function)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    else:
        # Text format for terminals and formatter hosts
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    logger.addHandler(handler)

    # Prevent propagation to root logger
    logger.propagate = False

    return logger


def configure_logging(level: str | None = None, format_type: str | None = None) -> logging.Logger:
    """
    Configure the application logger tree.

    Module loggers are children of ``card-autonumber`` and propagate to it,
    so configuring the root of the tree once covers every module.
    """
    return setup_logger(DEFAULT_LOGGER_NAME, level=level, format_type=format_type)


def get_logger(name: str = DEFAULT_LOGGER_NAME) -> logging.Logger:
    """
    Get a logger instance

    Module names such as ``card_autonumber.numbering.engine`` are mapped under
    the application logger so that ``configure_logging`` controls them.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    if name != DEFAULT_LOGGER_NAME:
        name = f"{DEFAULT_LOGGER_NAME}.{name}"

    # If the application logger has no handlers, set it up
    root = logging.getLogger(DEFAULT_LOGGER_NAME)
    if not root.handlers:
        setup_logger(DEFAULT_LOGGER_NAME)

    return logging.getLogger(name)


class log_operation:
    """
    Context manager for logging operation duration

    Usage:
        with log_operation("Numbering cards", logger=logger, source="deck.typ"):
            # do work
            pass
    """

    def __init__(self, operation_name: str, logger: logging.Logger | None = None, **extra_fields):
        """
        Initialize operation logger

        Args:
            operation_name: Name of the operation
            logger: Logger instance (uses the application logger if None)
            **extra_fields: Additional fields to include in logs
        """
        self.operation_name = operation_name
        self.logger = logger or get_logger()
        self.extra_fields = extra_fields
        self.start_time = None

    def __enter__(self):
        """Start operation"""
        self.start_time = time.time()
        self.logger.info(
            f"Starting: {self.operation_name}",
            extra={"operation": self.operation_name, **self.extra_fields}
        )
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """End operation"""
        duration = time.time() - self.start_time

        if exc_type is None:
            self.logger.info(
                f"Completed: {self.operation_name}",
                extra={
                    "operation": self.operation_name,
                    "duration_seconds": round(duration, 3),
                    "status": "success",
                    **self.extra_fields
                }
            )
        else:
            self.logger.error(
                f"Failed: {self.operation_name}",
                extra={
                    "operation": self.operation_name,
                    "duration_seconds": round(duration, 3),
                    "status": "error",
                    "error_type": exc_type.__name__,
                    "error_message": str(exc_val),
                    **self.extra_fields
                },
            )
        return False  # Don't suppress exceptions
