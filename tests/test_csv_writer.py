"""Tests for CSV output."""
import shutil
import tempfile
import unittest
from pathlib import Path

from statementflow.output import CSVWriter
from statementflow.parser import TransactionRecord
from statementflow.utils.exceptions import OutputError


class TestCSVWriter(unittest.TestCase):
    """Test CSVWriter functionality."""

    def setUp(self):
        """Set up test fixtures."""
        self.test_dir = Path(tempfile.mkdtemp())
        self.writer = CSVWriter()
        self.records = [
            TransactionRecord("02.03.2020", "Dauerauftrag/Terminueberw.XUSR1 - Miete", "-111,11"),
            TransactionRecord("06.03.2020", "SVCSUBSCR", "1.234,56"),
        ]

    def tearDown(self):
        """Clean up test fixtures."""
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def test_write_semicolon_file(self):
        """Test writing a semicolon-delimited CSV file."""
        csv_path = self.writer.write(self.records, self.test_dir / "out" / "statement.csv")

        self.assertEqual(
            csv_path.read_text(encoding="utf-8"),
            "data;description;value\n"
            "02.03.2020;Dauerauftrag/Terminueberw.XUSR1 - Miete;-111,11\n"
            "06.03.2020;SVCSUBSCR;1.234,56\n"
        )

    def test_delimiter_in_description_is_quoted(self):
        """Test a description containing the delimiter is quoted."""
        rendered = self.writer.render([TransactionRecord("01.01.2020", "a;b", "-1,00")])
        self.assertEqual(rendered, 'data;description;value\n01.01.2020;"a;b";-1,00\n')

    def test_output_path_for(self):
        """Test the CSV path is derived from the PDF stem."""
        path = CSVWriter.output_path_for(Path("in") / "sub" / "Statement_2020.PDF", self.test_dir)
        self.assertEqual(path, self.test_dir / "Statement_2020.csv")

    def test_unwritable_destination(self):
        """Test an unwritable destination raises OutputError."""
        blocker = self.test_dir / "blocker"
        blocker.write_text("not a directory")

        with self.assertRaises(OutputError):
            self.writer.write(self.records, blocker / "statement.csv")

    def test_unencodable_record_leaves_no_file(self):
        """Test an encoding failure raises OutputError and leaves nothing behind."""
        out_dir = self.test_dir / "out"
        records = [TransactionRecord("02.03.2020", "Shop\ud800", "-1,00")]

        with self.assertRaises(OutputError):
            self.writer.write(records, out_dir / "statement.csv")

        self.assertEqual(list(out_dir.iterdir()), [])

    def test_rewrite_replaces_previous_file(self):
        """Test writing over an existing CSV replaces its content."""
        csv_path = self.test_dir / "statement.csv"
        csv_path.write_text("stale", encoding="utf-8")

        self.writer.write(self.records[:1], csv_path)

        self.assertEqual(
            csv_path.read_text(encoding="utf-8"),
            "data;description;value\n02.03.2020;Dauerauftrag/Terminueberw.XUSR1 - Miete;-111,11\n"
        )
        self.assertEqual([p.name for p in self.test_dir.iterdir()], ["statement.csv"])


if __name__ == "__main__":
    unittest.main()
