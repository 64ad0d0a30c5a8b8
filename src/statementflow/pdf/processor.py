"""PDF text extraction for bank statements."""
import io
from pathlib import Path
from typing import List, Optional, Union

import pdfplumber
import pypdf

from statementflow.utils.logger import get_logger
from statementflow.utils.exceptions import PDFError

logger = get_logger()

PDFSource = Union[str, Path, bytes]


class PDFProcessor:
    """Extracts linear text from PDF files."""

    MIN_TEXT_LENGTH = 50

    def __init__(self, min_text_length: int = MIN_TEXT_LENGTH, line_separator: str = ""):
        """
        Initialize PDF processor.

        Args:
            min_text_length: Shortest text accepted as a successful extraction
            line_separator: String used to re-join page lines; the statement
                parser expects linear text, so lines are glued by default
        """
        self.min_text_length = min_text_length
        self.line_separator = line_separator

    def extract_text(self, source: PDFSource, name: Optional[str] = None) -> str:
        """
        Extract text from a PDF file or raw PDF bytes.

        Args:
            source: Path to PDF file, or its content
            name: Label for log messages (defaults to the file name)

        Returns:
            Extracted text

        Raises:
            PDFError: If extraction fails or text is too short
        """
        if name is None:
            name = "<bytes>" if isinstance(source, bytes) else Path(source).name

        # Try pdfplumber first
        text = self._extract_with_pdfplumber(source, name)

        if not text or len(text) < self.min_text_length:
            # Fallback to pypdf
            logger.info(f"pdfplumber extracted {len(text) if text else 0} chars, trying pypdf for {name}")
            text = self._extract_with_pypdf(source, name)

        if not self.validate_extraction(text):
            raise PDFError(
                f"Extracted text too short ({len(text) if text else 0} chars, minimum {self.min_text_length}). "
                f"File may be scanned or corrupted."
            )

        logger.info(f"Successfully extracted {len(text)} characters from {name}")
        return text

    def validate_extraction(self, text: Optional[str]) -> bool:
        """
        Validate extracted text.

        Args:
            text: Extracted text

        Returns:
            True if valid, False otherwise
        """
        return bool(text) and len(text) >= self.min_text_length

    def _open(self, source: PDFSource):
        if isinstance(source, bytes):
            return io.BytesIO(source)
        return open(source, "rb")

    def _join_pages(self, page_texts: List[str]) -> str:
        lines = [line for page_text in page_texts for line in page_text.splitlines()]
        return self.line_separator.join(lines)

    def _extract_with_pdfplumber(self, source: PDFSource, name: str) -> Optional[str]:
        """
        Extract text using pdfplumber.

        Args:
            source: PDF path or bytes
            name: Label for log messages

        Returns:
            Extracted text or None if failed
        """
        try:
            with self._open(source) as f, pdfplumber.open(f) as pdf:
                text_parts = []
                logger.debug(f"pdfplumber: Processing {len(pdf.pages)} pages from {name}")
                for i, page in enumerate(pdf.pages, 1):
                    page_text = page.extract_text()
                    if page_text:
                        text_parts.append(page_text)
                        logger.debug(f"pdfplumber: Page {i} extracted {len(page_text)} chars")
                    else:
                        logger.debug(f"pdfplumber: Page {i} extracted no text")

                text = self._join_pages(text_parts)
                logger.info(f"pdfplumber extracted {len(text)} chars from {len(pdf.pages)} pages in {name}")
                return text if text else None

        except Exception as e:
            logger.warning(f"pdfplumber extraction failed for {name}: {e}")
            return None

    def _extract_with_pypdf(self, source: PDFSource, name: str) -> Optional[str]:
        """
        Extract text using pypdf (fallback).

        Args:
            source: PDF path or bytes
            name: Label for log messages

        Returns:
            Extracted text or None if failed
        """
        try:
            with self._open(source) as f:
                reader = pypdf.PdfReader(f)
                text_parts = []
                logger.debug(f"pypdf: Processing {len(reader.pages)} pages from {name}")

                for i, page in enumerate(reader.pages, 1):
                    page_text = page.extract_text()
                    if page_text:
                        text_parts.append(page_text)
                        logger.debug(f"pypdf: Page {i} extracted {len(page_text)} chars")
                    else:
                        logger.debug(f"pypdf: Page {i} extracted no text")

                text = self._join_pages(text_parts)
                logger.info(f"pypdf extracted {len(text)} chars from {len(reader.pages)} pages in {name}")
                return text if text else None

        except Exception as e:
            logger.error(f"pypdf extraction failed for {name}: {e}")
            return None
