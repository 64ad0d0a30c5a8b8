"""Statement discovery module."""
from .models import StatementFile
from .scanner import StatementScanner

__all__ = ["StatementFile", "StatementScanner"]
