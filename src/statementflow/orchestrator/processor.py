"""Processing orchestrator for batch statement conversion."""
import time
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from statementflow.config import AppSettings
from statementflow.output import CSVWriter
from statementflow.parser import StatementParser, TransactionRecord
from statementflow.pdf import PDFProcessor
from statementflow.source import StatementFile, StatementScanner
from statementflow.utils.logger import get_logger, set_document_context
from statementflow.utils.exceptions import StatementFlowError

logger = get_logger()

STATUS_CONVERTED = "converted"
STATUS_EMPTY = "empty"
STATUS_FAILED = "failed"


@dataclass
class DocumentResult:
    """Outcome of converting one statement."""
    name: str
    status: str
    records: int = 0
    output_path: Optional[Path] = None
    error: Optional[str] = None


@dataclass
class BatchSummary:
    """Result of one batch run."""
    documents: List[DocumentResult] = field(default_factory=list)
    duration_seconds: float = 0.0

    def count(self, status: str) -> int:
        return sum(1 for doc in self.documents if doc.status == status)

    @property
    def converted(self) -> int:
        return self.count(STATUS_CONVERTED)

    @property
    def empty(self) -> int:
        return self.count(STATUS_EMPTY)

    @property
    def failed(self) -> int:
        return self.count(STATUS_FAILED)

    @property
    def transactions(self) -> int:
        return sum(doc.records for doc in self.documents)


class ProcessingOrchestrator:
    """Orchestrates scanning, extraction, parsing and CSV output."""

    def __init__(self, settings: AppSettings):
        """
        Initialize orchestrator.

        Args:
            settings: Application settings
        """
        self.settings = settings
        self.output_dir = Path(settings.output_dir)

        self.scanner = StatementScanner(settings.input_dir)
        self.pdf_processor = PDFProcessor(
            min_text_length=settings.pdf_min_text_length,
            line_separator=settings.pdf_line_separator
        )
        self.parser = StatementParser(settings.markers)
        self.writer = CSVWriter(settings.csv_delimiter, settings.csv_header)

        logger.info("Processing Orchestrator initialized")

    def run(self) -> BatchSummary:
        """
        Convert every statement in the input directory.

        Returns:
            BatchSummary with one DocumentResult per file, in scan order
        """
        set_document_context(None)
        start_time = time.time()

        statements = self.scanner.scan()
        if not statements:
            logger.info("No PDF files found")
            return BatchSummary(duration_seconds=time.time() - start_time)

        self._warn_duplicate_outputs(statements)

        workers = max(1, self.settings.max_concurrent_documents)
        if workers == 1:
            documents = [self.process_statement(statement) for statement in statements]
        else:
            with ThreadPoolExecutor(max_workers=workers) as executor:
                documents = list(executor.map(self.process_statement, statements))

        summary = BatchSummary(documents=documents, duration_seconds=time.time() - start_time)
        logger.info(
            f"Batch complete: {summary.converted} converted, {summary.empty} without transactions, "
            f"{summary.failed} failed, {summary.transactions} transactions in {summary.duration_seconds:.1f}s"
        )
        return summary

    def _warn_duplicate_outputs(self, statements: List[StatementFile]) -> None:
        """Warn when several statements map to the same CSV file."""
        targets = Counter(
            CSVWriter.output_path_for(statement.path, self.output_dir) for statement in statements
        )
        for target, count in targets.items():
            if count > 1:
                logger.warning(f"{count} statements share the output file {target}; only the last one written is kept")

    def process_statement(self, statement: StatementFile) -> DocumentResult:
        """
        Convert a single statement; errors are reported, not raised.

        Args:
            statement: StatementFile object

        Returns:
            DocumentResult
        """
        set_document_context(statement.name)
        logger.info(f"Processing file: {statement.path}")

        try:
            records = self.extract_records(statement.path)

            if not records:
                logger.warning(f"No records found in {statement.name}")
                return DocumentResult(name=statement.name, status=STATUS_EMPTY)

            output_path = self.writer.write(
                records,
                CSVWriter.output_path_for(statement.path, self.output_dir)
            )
            logger.info(f"Successfully converted {statement.name} to {output_path}: {len(records)} transactions")

            return DocumentResult(
                name=statement.name,
                status=STATUS_CONVERTED,
                records=len(records),
                output_path=output_path
            )

        except StatementFlowError as e:
            logger.error(f"Processing error for {statement.name}: {e}")
            return DocumentResult(name=statement.name, status=STATUS_FAILED, error=str(e))

        except Exception as e:
            logger.error(f"Unexpected error processing {statement.name}: {e}")
            return DocumentResult(name=statement.name, status=STATUS_FAILED, error=str(e))

        finally:
            set_document_context(None)

    def extract_records(self, pdf_path: Path) -> List[TransactionRecord]:
        """Extract text from a PDF and parse it into records."""
        text = self.pdf_processor.extract_text(pdf_path)
        return self.parser.parse(text)
