"""Statement text parsing module."""
from .markers import MarkerSet, DEFAULT_MARKERS
from .models import Segment, TransactionRecord
from .cleaning import cut_noise_tail, trim_summary, find_earliest
from .normalizer import HeaderNormalizer
from .segmenter import DateSegmenter
from .reconstructor import TransactionReconstructor
from .statement import StatementParser, parse_statement

__all__ = [
    "MarkerSet",
    "DEFAULT_MARKERS",
    "Segment",
    "TransactionRecord",
    "cut_noise_tail",
    "trim_summary",
    "find_earliest",
    "HeaderNormalizer",
    "DateSegmenter",
    "TransactionReconstructor",
    "StatementParser",
    "parse_statement",
]
