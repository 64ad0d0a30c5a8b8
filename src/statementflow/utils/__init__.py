"""Utility modules."""
from .logger import get_logger, setup_logging, set_document_context
from .exceptions import (
    StatementFlowError,
    ConfigError,
    PDFError,
    OutputError
)

__all__ = [
    "get_logger",
    "setup_logging",
    "set_document_context",
    "StatementFlowError",
    "ConfigError",
    "PDFError",
    "OutputError"
]
