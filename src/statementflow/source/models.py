"""Data models for statement discovery."""
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path


@dataclass
class StatementFile:
    """PDF statement found on disk."""
    path: Path
    name: str
    size: int
    modified_time: datetime

    @property
    def stem(self) -> str:
        return self.path.stem
