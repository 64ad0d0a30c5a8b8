"""Statement text to transaction records."""
from typing import List

from statementflow.utils.logger import get_logger

from .markers import DEFAULT_MARKERS, MarkerSet
from .models import TransactionRecord
from .normalizer import HeaderNormalizer
from .reconstructor import TransactionReconstructor

logger = get_logger()


class StatementParser:
    """Runs header normalization and transaction reconstruction."""

    def __init__(self, markers: MarkerSet = DEFAULT_MARKERS):
        self.markers = markers
        self.normalizer = HeaderNormalizer(markers)
        self.reconstructor = TransactionReconstructor(markers)

    def parse(self, text: str) -> List[TransactionRecord]:
        """
        Parse the text of one statement.

        Args:
            text: Text extracted from the statement PDF

        Returns:
            Transaction records, possibly empty
        """
        if not text:
            return []

        normalized = self.normalizer.normalize(text)
        records = self.reconstructor.reconstruct(normalized)

        logger.debug(f"Parsed {len(records)} transactions from {len(text)} characters")
        return records


def parse_statement(text: str, markers: MarkerSet = DEFAULT_MARKERS) -> List[TransactionRecord]:
    """Parse statement text with the given markers."""
    return StatementParser(markers).parse(text)
