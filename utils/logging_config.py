"""
Logging configuration with structured logging and optional file output.
"""
import logging
import logging.handlers
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Optional
import traceback


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        if record.exc_info:
            log_data['exception'] = {
                'type': record.exc_info[0].__name__,
                'message': str(record.exc_info[1]),
                'traceback': traceback.format_exception(*record.exc_info)
            }

        if hasattr(record, 'extra_fields'):
            log_data.update(record.extra_fields)

        return json.dumps(log_data, default=str)


class _StderrHandler(logging.StreamHandler):
    """Stream handler bound to whatever sys.stderr currently is."""

    def __init__(self):
        logging.Handler.__init__(self)

    @property
    def stream(self):
        return sys.stderr


class LoggerFactory:
    """Factory for creating configured loggers."""

    ROOT_NAME = "creational"

    _loggers: Dict[str, logging.Logger] = {}
    _handlers: list = []
    _configured = False

    @classmethod
    def configure(
        cls,
        log_level: str = "WARNING",
        enable_console: bool = True,
        enable_structured: bool = False,
        log_dir: Optional[str] = None,
        max_bytes: int = 10 * 1024 * 1024,  # 10MB
        backup_count: int = 5,
        force: bool = False
    ):
        """
        Configure logging for the library.

        Handlers are attached to the ``creational`` logger, not the root
        logger. Console output goes to stderr; stdout carries demo output.

        Args:
            log_level: Level name applied to the library logger
            enable_console: Attach a stderr stream handler
            enable_structured: Emit JSON lines instead of plain text
            log_dir: Directory for a rotating ``creational.log``; disabled if None
            max_bytes: Rotation size for the file handler
            backup_count: Number of rotated files to keep
            force: Drop existing handlers and configure again
        """
        if cls._configured and not force:
            return

        level = getattr(logging, log_level.upper(), None)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {log_level}")

        library_logger = logging.getLogger(cls.ROOT_NAME)
        for handler in cls._handlers:
            library_logger.removeHandler(handler)
            handler.close()
        cls._handlers = []

        library_logger.setLevel(level)

        if enable_console:
            console_handler = _StderrHandler()
            if enable_structured:
                console_handler.setFormatter(StructuredFormatter())
            else:
                console_handler.setFormatter(
                    logging.Formatter(
                        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
                    )
                )
            library_logger.addHandler(console_handler)
            cls._handlers.append(console_handler)

        if log_dir:
            log_path = Path(log_dir)
            log_path.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                log_path / "creational.log",
                maxBytes=max_bytes,
                backupCount=backup_count
            )
            file_handler.setLevel(logging.DEBUG)
            if enable_structured:
                file_handler.setFormatter(StructuredFormatter())
            else:
                file_handler.setFormatter(
                    logging.Formatter(
                        '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
                    )
                )
            library_logger.addHandler(file_handler)
            cls._handlers.append(file_handler)

        cls._configured = True

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get or create a logger under the library namespace."""
        if not cls._configured:
            cls.configure()

        if name not in cls._loggers:
            if name == cls.ROOT_NAME or name.startswith(cls.ROOT_NAME + '.'):
                qualified = name
            else:
                qualified = f"{cls.ROOT_NAME}.{name}"
            cls._loggers[name] = logging.getLogger(qualified)

        return cls._loggers[name]


class LogContext:
    """Context manager for adding extra fields to logs."""

    def __init__(self, logger: logging.Logger, **extra_fields):
        self.logger = logger
        self.extra_fields = extra_fields
        self.old_factory = None

    def __enter__(self):
        old_factory = logging.getLogRecordFactory()

        def record_factory(*args, **kwargs):
            record = old_factory(*args, **kwargs)
            record.extra_fields = self.extra_fields
            return record

        logging.setLogRecordFactory(record_factory)
        self.old_factory = old_factory
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.old_factory:
            logging.setLogRecordFactory(self.old_factory)


# Convenience function
def get_logger(name: str) -> logging.Logger:
    """Get a configured logger."""
    return LoggerFactory.get_logger(name)
