"""Literal marker configuration for statement cleaning."""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class MarkerSet:
    """
    Ordered, immutable marker lists used by the parser.

    header_marker: literal that precedes the column headers; text up to and
        including it is dropped when it appears before the first date.
    noise_keywords: literals that start non-transactional boilerplate inside
        a fragment (addresses, page footers, IBAN/BIC blocks).
    summary_markers: literals that start statement-closing content
        (balances, disclosures).
    """
    header_marker: Optional[str] = "Valuta"
    noise_keywords: Tuple[str, ...] = (
        "Datum",
        "Auszugsnummer",
        "Buchung",
        "Valuta",
        "IBAN",
        "BIC",
        "Seite",
        "ING-DiBa AG",
        "Herrn",
    )
    summary_markers: Tuple[str, ...] = (
        "Neuer Saldo",
        "Alter Saldo",
        "Kunden-Information",
        "Kontoüberziehung",
        "Vorliegender Freistellungsauftrag",
        "Bitte beachten",
    )

    def __post_init__(self):
        # Lists coming from YAML are frozen into tuples
        object.__setattr__(self, "noise_keywords", tuple(k for k in self.noise_keywords if k))
        object.__setattr__(self, "summary_markers", tuple(m for m in self.summary_markers if m))

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "MarkerSet":
        """Build a marker set from a config mapping, keeping defaults for missing keys."""
        if not data:
            return cls()

        defaults = cls()
        return cls(
            header_marker=data.get("header_marker", defaults.header_marker),
            noise_keywords=tuple(data.get("noise_keywords", defaults.noise_keywords)),
            summary_markers=tuple(data.get("summary_markers", defaults.summary_markers)),
        )


DEFAULT_MARKERS = MarkerSet()
