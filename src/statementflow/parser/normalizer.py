"""Header normalization for extracted statement text."""
from statementflow.utils.logger import get_logger

from .markers import DEFAULT_MARKERS, MarkerSet
from .patterns import DATE_PATTERN

logger = get_logger()


class HeaderNormalizer:
    """Drops the statement preamble ending at the header marker."""

    def __init__(self, markers: MarkerSet = DEFAULT_MARKERS):
        self.markers = markers

    def normalize(self, text: str) -> str:
        """
        Remove everything up to and including the header marker.

        The cut only happens when the marker comes before the first date
        (or there is no date at all); a later occurrence belongs to a
        transaction body and is left alone.

        Args:
            text: Raw extracted text

        Returns:
            Normalized text
        """
        marker = self.markers.header_marker
        if not text or not marker:
            return text or ""

        marker_idx = text.find(marker)
        if marker_idx == -1:
            return text

        first_date = DATE_PATTERN.search(text)
        if first_date is None or marker_idx < first_date.start():
            logger.debug(f"Dropped {marker_idx + len(marker)} header characters")
            return text[marker_idx + len(marker):]

        return text
