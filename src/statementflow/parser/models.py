"""Data models for statement parsing."""
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class Segment:
    """A date token and the trimmed text up to the next date token."""
    date: str
    body: str
    start: int  # offset of the date token
    end: int  # offset just past the date token


@dataclass(frozen=True)
class TransactionRecord:
    """One reconstructed transaction, fields kept in source format."""
    date: str
    description: str
    amount: str

    def as_row(self) -> List[str]:
        return [self.date, self.description, self.amount]
