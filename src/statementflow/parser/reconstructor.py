"""Transaction reconstruction over date segments."""
from typing import List, Optional, Sequence, Tuple

from statementflow.utils.logger import get_logger

from .cleaning import (
    cut_noise_tail,
    strip_first_listed_summary,
    strip_noise_keywords,
    trim_summary,
)
from .markers import DEFAULT_MARKERS, MarkerSet
from .models import Segment, TransactionRecord
from .patterns import has_amount, split_amount
from .segmenter import DateSegmenter

logger = get_logger()

DESCRIPTION_SEPARATOR = " - "


class TransactionReconstructor:
    """
    Rebuilds transactions from normalized statement text.

    The first pass walks the segments with a cursor. A segment whose body
    ends in an amount anchors a record and absorbs the following same-date
    segments (absorb-after-amount). A segment without an amount collects
    same-date segments until one yields an amount (scan-for-amount), or
    gives up when the date changes or a summary block starts.

    The second pass re-segments the text left after the last consumed date
    token and recovers records whose amount only shows up once noise and
    summary text is cut off (second-pass-recovery).
    """

    def __init__(self, markers: MarkerSet = DEFAULT_MARKERS):
        self.markers = markers
        self.segmenter = DateSegmenter()

    def reconstruct(self, text: str) -> List[TransactionRecord]:
        """
        Extract transaction records.

        Args:
            text: Normalized statement text

        Returns:
            First-pass records followed by second-pass records
        """
        segments = self.segmenter.segment(text)
        if not segments:
            return []

        records, consumed_until = self._first_pass(segments)
        logger.debug(
            f"First pass: {len(records)} records from {len(segments)} segments, "
            f"consumed {consumed_until}/{len(text)} chars"
        )

        if 0 < consumed_until < len(text):
            recovered = self._recover_remaining(text[consumed_until:])
            if recovered:
                logger.debug(f"Second pass recovered {len(recovered)} records")
            records.extend(recovered)

        return records

    def _clean(self, fragment: str) -> Tuple[str, bool]:
        return trim_summary(cut_noise_tail(fragment, self.markers), self.markers)

    def _first_pass(self, segments: Sequence[Segment]) -> Tuple[List[TransactionRecord], int]:
        records = []
        consumed_until = 0
        i = 0

        while i < len(segments):
            split = split_amount(segments[i].body)
            if split is not None:
                record, stop = self._absorb_after_amount(segments, i, split)
            else:
                record, stop = self._scan_for_amount(segments, i)

            if record is None:
                i += 1
                continue

            records.append(record)
            consumed_until = segments[stop - 1].end
            # The segment that stopped absorption is examined on its own
            i = stop

        return records, consumed_until

    def _absorb_after_amount(
        self,
        segments: Sequence[Segment],
        i: int,
        split: Tuple[str, str]
    ) -> Tuple[TransactionRecord, int]:
        """Anchor a record on segment i and absorb following same-date fragments."""
        anchor = segments[i]
        before, amount = split
        parts = [before] if before else []

        j = i + 1
        while j < len(segments) and segments[j].date == anchor.date:
            if not segments[j].body:
                j += 1
                continue

            text, had_summary = self._clean(segments[j].body)
            if had_summary:
                if text:
                    parts.append(text)
                break
            if not text:
                j += 1
                continue
            if has_amount(text):
                break

            parts.append(text)
            j += 1

        return TransactionRecord(anchor.date, DESCRIPTION_SEPARATOR.join(parts), amount), j

    def _scan_for_amount(
        self,
        segments: Sequence[Segment],
        i: int
    ) -> Tuple[Optional[TransactionRecord], int]:
        """Collect same-date fragments until one carries the amount."""
        anchor = segments[i]
        parts = [anchor.body] if anchor.body else []

        j = i + 1
        while j < len(segments) and segments[j].date == anchor.date:
            if not segments[j].body:
                j += 1
                continue

            text, had_summary = self._clean(segments[j].body)
            if not text:
                j += 1
                continue
            if had_summary:
                # Closing block before any amount: nothing to emit for this date
                return None, i + 1

            split = split_amount(text)
            if split is not None:
                before, amount = split
                if before:
                    parts.append(before)
                stop = self._absorb_tail(segments, j + 1, anchor.date, parts)
                return TransactionRecord(anchor.date, DESCRIPTION_SEPARATOR.join(parts), amount), stop

            parts.append(text)
            j += 1

        return None, i + 1

    def _absorb_tail(
        self,
        segments: Sequence[Segment],
        k: int,
        date: str,
        parts: List[str]
    ) -> int:
        """Append same-date fragments after a found amount; returns the stop index."""
        while k < len(segments) and segments[k].date == date:
            if not segments[k].body:
                k += 1
                continue

            text, had_summary = self._clean(segments[k].body)
            if not text:
                k += 1
                continue
            if had_summary:
                parts.append(text)
                break
            if has_amount(text):
                break

            parts.append(text)
            k += 1

        return k

    def _recover_remaining(self, remaining: str) -> List[TransactionRecord]:
        """
        Second pass over unconsumed text.

        Cleaning here only cuts at literal markers; non-ASCII runs are kept.
        """
        segments = self.segmenter.segment(remaining)
        records = []

        k = 0
        while k < len(segments):
            anchor = segments[k]
            if not anchor.body:
                k += 1
                continue

            content = strip_noise_keywords(anchor.body, self.markers)
            content = strip_first_listed_summary(content, self.markers)

            split = split_amount(content)
            if split is None:
                k += 1
                continue

            before, amount = split
            parts = [before] if before else []

            m = k + 1
            while m < len(segments) and segments[m].date == anchor.date:
                body = segments[m].body
                if not body or has_amount(body):
                    break
                parts.append(strip_noise_keywords(body, self.markers))
                m += 1

            records.append(TransactionRecord(anchor.date, DESCRIPTION_SEPARATOR.join(parts), amount))
            k = m

        return records
