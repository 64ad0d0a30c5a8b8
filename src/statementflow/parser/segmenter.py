"""Date-based segmentation of statement text."""
from typing import List

from .models import Segment
from .patterns import DATE_PATTERN, trim


class DateSegmenter:
    """Splits text at every DD.MM.YYYY token."""

    def segment(self, text: str) -> List[Segment]:
        """
        Split text into (date, body) segments in document order.

        Args:
            text: Statement text

        Returns:
            Segments; empty when the text holds no date
        """
        matches = list(DATE_PATTERN.finditer(text))
        segments = []

        for i, match in enumerate(matches):
            body_end = matches[i + 1].start() if i + 1 < len(matches) else len(text)
            segments.append(Segment(
                date=match.group(0),
                body=trim(text[match.end():body_end]),
                start=match.start(),
                end=match.end()
            ))

        return segments
