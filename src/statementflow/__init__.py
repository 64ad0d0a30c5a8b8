"""StatementFlow: bank statement PDFs to semicolon-delimited CSV."""

__version__ = "0.1.0"
