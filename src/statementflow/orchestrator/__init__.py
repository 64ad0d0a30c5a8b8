"""Processing orchestration module."""
from .processor import ProcessingOrchestrator, DocumentResult, BatchSummary

__all__ = ["ProcessingOrchestrator", "DocumentResult", "BatchSummary"]
