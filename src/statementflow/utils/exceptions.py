"""Custom exception classes for StatementFlow."""


class StatementFlowError(Exception):
    """Base exception for StatementFlow."""
    pass


class ConfigError(StatementFlowError):
    """Configuration-related errors."""
    pass


class PDFError(StatementFlowError):
    """PDF extraction errors."""
    pass


class OutputError(StatementFlowError):
    """CSV output errors."""
    pass
