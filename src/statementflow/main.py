"""Command line entry point."""
import argparse
import dataclasses
import sys
from pathlib import Path
from typing import List, Optional

from statementflow.config import AppSettings
from statementflow.orchestrator import ProcessingOrchestrator
from statementflow.output import CSVWriter
from statementflow.parser import StatementParser
from statementflow.pdf import PDFProcessor
from statementflow.utils.logger import get_logger, setup_logging
from statementflow.utils.exceptions import ConfigError, StatementFlowError

logger = get_logger()


def _load_settings(args: argparse.Namespace) -> AppSettings:
    """Load settings and apply command line overrides."""
    settings = AppSettings.load(Path(args.config) if args.config else None)

    overrides = {}
    if args.input_dir:
        overrides["input_dir"] = args.input_dir
    if args.output_dir:
        overrides["output_dir"] = args.output_dir
    if args.log_level:
        overrides["log_level"] = args.log_level
    if args.workers:
        overrides["max_concurrent_documents"] = args.workers
    if overrides:
        settings = dataclasses.replace(settings, **overrides)

    is_valid, message = settings.validate()
    if not is_valid:
        raise ConfigError(f"Invalid configuration: {message}")

    return settings


def run_command(settings: AppSettings) -> int:
    """Convert every PDF in the input directory."""
    logger.info(f"Input directory: {settings.input_dir}")
    logger.info(f"Output directory: {settings.output_dir}")

    orchestrator = ProcessingOrchestrator(settings)
    summary = orchestrator.run()

    return 1 if summary.failed else 0


def parse_command(settings: AppSettings, file_path: str) -> int:
    """Print the CSV for a single .pdf or .txt statement to stdout."""
    path = Path(file_path)

    if path.suffix.lower() == ".txt":
        text = path.read_text(encoding="utf-8")
    else:
        processor = PDFProcessor(settings.pdf_min_text_length, settings.pdf_line_separator)
        text = processor.extract_text(path)

    records = StatementParser(settings.markers).parse(text)
    if not records:
        logger.warning(f"No records found in {path.name}")
        return 0

    sys.stdout.write(CSVWriter(settings.csv_delimiter, settings.csv_header).render(records))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convert bank statement PDFs to CSV")
    parser.add_argument(
        "command",
        nargs="?",
        choices=["run", "parse"],
        default="run",
        help="Command to execute (default: run)"
    )
    parser.add_argument(
        "file",
        nargs="?",
        help="Statement file (.pdf or .txt) for the parse command"
    )
    parser.add_argument("--in", dest="input_dir", help="Input directory to search for PDF files")
    parser.add_argument("--out", dest="output_dir", help="Output directory to save CSV files")
    parser.add_argument("--config", help="Path to a config.yaml")
    parser.add_argument("--log-level", help="Log level (DEBUG, INFO, ...)")
    parser.add_argument("--workers", type=int, help="Statements processed concurrently")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for StatementFlow."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "parse" and not args.file:
        parser.error("the parse command requires a file")

    # Keep stdout for the CSV in parse mode, including for configuration errors
    console = sys.stderr if args.command == "parse" else None
    if console is not None:
        setup_logging(stream=console)

    try:
        settings = _load_settings(args)
    except ConfigError as e:
        logger.critical(str(e))
        return 1

    setup_logging(
        settings.log_level,
        settings.log_dir,
        settings.log_max_file_size_mb,
        settings.log_backup_count,
        stream=console
    )

    try:
        if args.command == "parse":
            return parse_command(settings, args.file)
        return run_command(settings)
    except (StatementFlowError, OSError) as e:
        logger.critical(f"Fatal error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
