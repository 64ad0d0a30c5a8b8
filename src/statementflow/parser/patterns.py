"""Date and amount grammars of the statement text."""
import re
from typing import Optional, Tuple

# DD.MM.YYYY, not calendar-validated
DATE_PATTERN = re.compile(r"[0-9]{2}\.[0-9]{2}\.[0-9]{4}")

# -1.234,56 style amount, anchored at the very end of a fragment
AMOUNT_PATTERN = re.compile(r"-?[0-9]{1,3}(?:\.[0-9]{3})*,[0-9]{2}\Z")

# Unicode White_Space; str.strip() would also drop \x1c-\x1f
WHITESPACE = (
    "\t\n\v\f\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def trim(text: str) -> str:
    return text.strip(WHITESPACE)


def has_amount(text: str) -> bool:
    return AMOUNT_PATTERN.search(text) is not None


def split_amount(text: str) -> Optional[Tuple[str, str]]:
    """
    Split a fragment ending in an amount.

    Args:
        text: Trimmed fragment

    Returns:
        (description, amount) tuple, or None if the fragment has no amount
    """
    match = AMOUNT_PATTERN.search(text)
    if match is None:
        return None
    return trim(text[:match.start()]), text[match.start():]
