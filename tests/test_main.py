"""Tests for the command line entry point."""
import contextlib
import io
import shutil
import tempfile
import unittest
from pathlib import Path

from statementflow.main import main


class TestMain(unittest.TestCase):
    """Test CLI commands."""

    def setUp(self):
        """Set up test fixtures."""
        self.test_dir = Path(tempfile.mkdtemp())

    def tearDown(self):
        """Clean up test fixtures."""
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def test_parse_text_file(self):
        """Test parsing a text statement prints CSV to stdout."""
        statement = self.test_dir / "statement.txt"
        statement.write_text("Valuta02.03.2020Miete-111,1102.03.2020Ref 1", encoding="utf-8")

        stdout = io.StringIO()
        with contextlib.redirect_stdout(stdout):
            exit_code = main(["parse", str(statement)])

        self.assertEqual(exit_code, 0)
        self.assertEqual(stdout.getvalue(), "data;description;value\n02.03.2020;Miete - Ref 1;-111,11\n")

    def test_run_with_missing_input_directory(self):
        """Test a missing input directory exits with 1."""
        exit_code = main(["run", "--in", str(self.test_dir / "missing"), "--out", str(self.test_dir / "out")])
        self.assertEqual(exit_code, 1)

    def test_run_with_missing_config(self):
        """Test a missing configuration file exits with 1."""
        exit_code = main(["--config", str(self.test_dir / "missing.yaml")])
        self.assertEqual(exit_code, 1)

    def test_parse_config_error_stays_off_stdout(self):
        """Test a configuration error in parse mode is logged to stderr only."""
        statement = self.test_dir / "statement.txt"
        statement.write_text("02.03.2020Miete-111,11", encoding="utf-8")

        stdout = io.StringIO()
        stderr = io.StringIO()
        with contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(stderr):
            exit_code = main(["parse", str(statement), "--config", str(self.test_dir / "missing.yaml")])

        self.assertEqual(exit_code, 1)
        self.assertEqual(stdout.getvalue(), "")
        self.assertIn("Configuration file not found", stderr.getvalue())

    def test_parse_requires_file(self):
        """Test the parse command without a file is a usage error."""
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                main(["parse"])


if __name__ == "__main__":
    unittest.main()
