"""CSV output module."""
from .csv_writer import CSVWriter

__all__ = ["CSVWriter"]
