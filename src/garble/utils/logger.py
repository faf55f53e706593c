"""Logging utility for the garble package.

Handlers live on top-level loggers only. A dotted name such as
``garble.derive`` gets a child logger with no handlers and no level of its
own, so it follows whatever :meth:`Logger.configure` sets on ``garble``.
"""

import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional, Dict, Any, Iterable, Tuple

_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class Logger:
    """Centralized logging utility."""

    _instances: Dict[str, logging.Logger] = {}

    @classmethod
    def get_logger(cls, name: str = "garble",
                   level: str = "INFO",
                   log_to_file: bool = False,
                   log_dir: str = "logs") -> logging.Logger:
        """Get or create a logger instance.

        Args:
            name: Logger name
            level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_to_file: Whether to log to file
            log_dir: Directory for log files

        Returns:
            Configured logger instance. For dotted names, the child logger of
            the configured top-level logger.
        """
        if name in cls._instances:
            return cls._instances[name]

        if "." in name:
            # Make sure the parent carrying the handlers exists
            cls.get_logger(name.split(".", 1)[0], level=level,
                           log_to_file=log_to_file, log_dir=log_dir)
            logger = logging.getLogger(name)
            logger.setLevel(logging.NOTSET)
            cls._instances[name] = logger
            return logger

        # Create logger
        logger = logging.getLogger(name)
        logger.setLevel(getattr(logging, level.upper()))

        # Clear existing handlers
        logger.handlers.clear()

        # Console handler
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(cls._formatter())
        logger.addHandler(console_handler)

        # File handler
        if log_to_file:
            cls._add_file_handler(logger, log_dir)

        cls._instances[name] = logger
        return logger

    @classmethod
    def configure(cls, level: str = "INFO",
                  log_to_file: bool = False,
                  log_dir: str = "logs",
                  name: str = "garble") -> logging.Logger:
        """Apply logging settings to a top-level logger and its children.

        Args:
            level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_to_file: Whether to also log to a file
            log_dir: Directory for log files
            name: Top-level logger name

        Returns:
            The configured logger

        Raises:
            ValueError: If the level name is unknown
        """
        numeric_level = logging.getLevelName(str(level).upper())
        if not isinstance(numeric_level, int):
            raise ValueError(f"Unknown logging level: {level!r}")

        logger = cls.get_logger(name)
        logger.setLevel(numeric_level)
        for handler in logger.handlers:
            if not isinstance(handler, logging.FileHandler):
                handler.setLevel(numeric_level)

        has_file = any(isinstance(h, logging.FileHandler) for h in logger.handlers)
        if log_to_file and not has_file:
            cls._add_file_handler(logger, log_dir)

        return logger

    @classmethod
    def _formatter(cls) -> logging.Formatter:
        return logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT)

    @classmethod
    def _add_file_handler(cls, logger: logging.Logger, log_dir: str) -> Path:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_path / f"garble_{timestamp}.log"

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(cls._formatter())
        logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_file}")
        return log_file

    @classmethod
    def reset(cls):
        """Reset the cached logger instances."""
        for logger in cls._instances.values():
            for handler in list(logger.handlers):
                handler.close()
                logger.removeHandler(handler)
        cls._instances.clear()

    @classmethod
    def format_value(cls, value: Any, max_length: int = 80) -> str:
        """Format a value for logging."""
        text = repr(value).replace("\n", " ")
        if len(text) > max_length:
            text = text[:max_length] + "..."
        return f"{text} <{type(value).__name__}>"

    @classmethod
    def format_field_plan(cls, owner: str,
                          plan: Iterable[Tuple[str, Optional[type], bool]]) -> str:
        """Format a composite field plan for logging."""
        parts = []
        for name, width_type, skip in plan:
            part = name
            if width_type is not None:
                part += f":{width_type.__name__}"
            if skip:
                part += "(nogarble)"
            parts.append(part)
        return f"{owner}[" + ", ".join(parts) + "]"


def get_logger(name: str = "garble", **kwargs) -> logging.Logger:
    """Convenience function to get logger.

    Args:
        name: Logger name
        **kwargs: Additional arguments for Logger.get_logger()

    Returns:
        Logger instance
    """
    return Logger.get_logger(name, **kwargs)
