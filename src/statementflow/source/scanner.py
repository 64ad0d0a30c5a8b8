"""Local folder scanner for statement PDFs."""
from datetime import datetime
from pathlib import Path
from typing import List, Union

from .models import StatementFile
from statementflow.utils.logger import get_logger
from statementflow.utils.exceptions import ConfigError

logger = get_logger()


class StatementScanner:
    """Finds PDF statements below an input directory."""

    PDF_SUFFIX = ".pdf"

    def __init__(self, input_dir: Union[str, Path]):
        self.input_dir = Path(input_dir)

    def scan(self) -> List[StatementFile]:
        """
        Recursively collect PDF files in path order.

        Returns:
            StatementFile objects

        Raises:
            ConfigError: If the input directory does not exist
        """
        if not self.input_dir.is_dir():
            raise ConfigError(f"Input directory not found: {self.input_dir}")

        statements = []
        for path in sorted(self.input_dir.rglob("*")):
            if not path.is_file() or path.suffix.lower() != self.PDF_SUFFIX:
                continue

            stat = path.stat()
            statements.append(StatementFile(
                path=path,
                name=path.name,
                size=stat.st_size,
                modified_time=datetime.fromtimestamp(stat.st_mtime)
            ))

        logger.info(f"Found {len(statements)} PDF files in {self.input_dir}")
        return statements
