"""Logging infrastructure with document context."""
import logging
import sys
import threading
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union


class DocumentContextFilter(logging.Filter):
    """Add the statement file being processed to log records."""

    def __init__(self):
        super().__init__()
        self._local = threading.local()

    @property
    def document(self) -> Optional[str]:
        return getattr(self._local, "document", None)

    @document.setter
    def document(self, value: Optional[str]):
        self._local.document = value

    def filter(self, record):
        """Add document to record."""
        record.document = self.document or "batch"
        return True


class StatementFlowLogger:
    """Centralized logging manager."""

    def __init__(self, log_level: str = "INFO"):
        self.document_filter = DocumentContextFilter()
        self.formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] [document:%(document)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )

        self.logger = logging.getLogger("statementflow")
        self.configure(log_level)

    def configure(
        self,
        log_level: str = "INFO",
        log_dir: Optional[Union[str, Path]] = None,
        max_file_size_mb: int = 10,
        backup_count: int = 5,
        stream=None
    ) -> None:
        """
        (Re)build handlers.

        Args:
            log_level: Level name for the logger
            log_dir: Directory for the rotating log file; console only if None
            max_file_size_mb: Rotation size of the log file
            backup_count: Number of rotated files kept
            stream: Console stream, stdout by default
        """
        self.logger.setLevel(getattr(logging, log_level.upper()))

        # Remove existing handlers
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        console_handler = logging.StreamHandler(stream or sys.stdout)
        console_handler.setLevel(logging.INFO)
        self._attach(console_handler)

        if log_dir:
            log_path = Path(log_dir)
            log_path.mkdir(parents=True, exist_ok=True)

            file_handler = RotatingFileHandler(
                log_path / "statementflow.log",
                maxBytes=max_file_size_mb * 1024 * 1024,
                backupCount=backup_count,
                encoding="utf-8"
            )
            file_handler.setLevel(logging.DEBUG)
            self._attach(file_handler)

    def _attach(self, handler: logging.Handler) -> None:
        handler.setFormatter(self.formatter)
        handler.addFilter(self.document_filter)
        self.logger.addHandler(handler)

    def set_document_context(self, document: Optional[str]):
        """Set current document context for logging."""
        self.document_filter.document = document

    def get_logger(self) -> logging.Logger:
        """Get the configured logger."""
        return self.logger


# Global logger instance
_logger_instance: Optional[StatementFlowLogger] = None


def _instance() -> StatementFlowLogger:
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = StatementFlowLogger()
    return _logger_instance


def get_logger() -> logging.Logger:
    """Get or create global logger instance."""
    return _instance().get_logger()


def setup_logging(
    log_level: str = "INFO",
    log_dir: Optional[Union[str, Path]] = None,
    max_file_size_mb: int = 10,
    backup_count: int = 5,
    stream=None
) -> logging.Logger:
    """Apply logging settings to the global logger."""
    instance = _instance()
    instance.configure(log_level, log_dir, max_file_size_mb, backup_count, stream)
    return instance.get_logger()


def set_document_context(document: Optional[str]):
    """Set document context for logging in the current thread."""
    _instance().set_document_context(document)
