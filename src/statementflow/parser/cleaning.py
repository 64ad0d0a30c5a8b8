"""Fragment cleaning primitives shared by both reconstruction passes."""
from typing import Iterable, Tuple

from .markers import MarkerSet
from .patterns import trim

# Runs of this many non-printable-ASCII code points start boilerplate
NON_ASCII_RUN_LENGTH = 3


def _is_printable_ascii(char: str) -> bool:
    return 32 <= ord(char) <= 126


def find_earliest(text: str, markers: Iterable[str]) -> int:
    """
    Find the smallest start index of any marker in text.

    Args:
        text: Text to scan
        markers: Literal substrings

    Returns:
        Earliest index, or -1 if no marker occurs
    """
    earliest = -1
    for marker in markers:
        idx = text.find(marker)
        if idx >= 0 and (earliest == -1 or idx < earliest):
            earliest = idx
    return earliest


def find_non_ascii_run(text: str, min_length: int = NON_ASCII_RUN_LENGTH) -> int:
    """Return the start of the first run of min_length non-printable-ASCII chars, or -1."""
    run_start = -1
    run_length = 0
    for i, char in enumerate(text):
        if _is_printable_ascii(char):
            run_start = -1
            run_length = 0
            continue
        if run_start == -1:
            run_start = i
        run_length += 1
        if run_length >= min_length:
            return run_start
    return -1


def trim_summary(fragment: str, markers: MarkerSet) -> Tuple[str, bool]:
    """
    Truncate a fragment before the earliest summary marker.

    Args:
        fragment: Text to clean
        markers: Marker configuration

    Returns:
        (text, matched) - text is unchanged when no marker matched
    """
    idx = find_earliest(fragment, markers.summary_markers)
    if idx >= 0:
        return trim(fragment[:idx]), True
    return fragment, False


def cut_noise_tail(fragment: str, markers: MarkerSet) -> str:
    """
    Truncate a fragment where boilerplate starts.

    The cut point is the earliest noise keyword or the first run of
    non-printable-ASCII characters, whichever comes first. Without a cut
    point, all non-printable-ASCII characters are removed instead.
    """
    cut = find_earliest(fragment, markers.noise_keywords)

    run_start = find_non_ascii_run(fragment)
    if run_start >= 0 and (cut == -1 or run_start < cut):
        cut = run_start

    if cut >= 0:
        return trim(fragment[:cut])

    return trim("".join(c for c in fragment if _is_printable_ascii(c)))


def strip_noise_keywords(fragment: str, markers: MarkerSet) -> str:
    """Cut at each noise keyword in list order (no non-ASCII handling)."""
    for keyword in markers.noise_keywords:
        pos = fragment.find(keyword)
        if pos >= 0:
            fragment = trim(fragment[:pos])
    return fragment


def strip_first_listed_summary(fragment: str, markers: MarkerSet) -> str:
    """Cut at the first summary marker, in list order, that occurs in the fragment."""
    for marker in markers.summary_markers:
        pos = fragment.find(marker)
        if pos >= 0:
            return trim(fragment[:pos])
    return fragment
