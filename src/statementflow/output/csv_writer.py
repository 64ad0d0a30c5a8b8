"""CSV output for transaction records."""
import csv
import io
import os
import tempfile
from pathlib import Path
from typing import List, Sequence, Union

from statementflow.parser.models import TransactionRecord
from statementflow.utils.logger import get_logger
from statementflow.utils.exceptions import OutputError

logger = get_logger()

DEFAULT_HEADER = ("data", "description", "value")


class CSVWriter:
    """Writes transaction records as delimited text, one row per record."""

    def __init__(self, delimiter: str = ";", header: Sequence[str] = DEFAULT_HEADER):
        self.delimiter = delimiter
        self.header = list(header)

    def _write_rows(self, stream, records: List[TransactionRecord]) -> None:
        writer = csv.writer(stream, delimiter=self.delimiter, lineterminator="\n")
        writer.writerow(self.header)
        writer.writerows(record.as_row() for record in records)

    def render(self, records: List[TransactionRecord]) -> str:
        """Return the CSV document as a string."""
        buffer = io.StringIO()
        self._write_rows(buffer, records)
        return buffer.getvalue()

    def write(self, records: List[TransactionRecord], csv_path: Union[str, Path]) -> Path:
        """
        Write records to a CSV file.

        Args:
            records: Records to write
            csv_path: Destination file

        Returns:
            Path of the written file

        Raises:
            OutputError: If the file cannot be written
        """
        csv_path = Path(csv_path)
        tmp_path = None
        try:
            csv_path.parent.mkdir(parents=True, exist_ok=True)

            # Renamed into place only after the last row is written
            fd, tmp_name = tempfile.mkstemp(dir=csv_path.parent, prefix=f".{csv_path.stem}.", suffix=".tmp")
            tmp_path = Path(tmp_name)
            with open(fd, "w", encoding="utf-8", newline="") as f:
                self._write_rows(f, records)
            os.replace(tmp_path, csv_path)
        except (OSError, ValueError) as e:
            # UnicodeEncodeError is a ValueError
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)
            raise OutputError(f"Failed to write {csv_path}: {e}") from e

        logger.debug(f"Wrote {len(records)} rows to {csv_path}")
        return csv_path

    @staticmethod
    def output_path_for(pdf_path: Union[str, Path], output_dir: Union[str, Path]) -> Path:
        """Return <output_dir>/<pdf stem>.csv."""
        return Path(output_dir) / f"{Path(pdf_path).stem}.csv"
