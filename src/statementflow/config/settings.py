"""Application settings loader from YAML configuration."""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import yaml

from statementflow.parser.markers import MarkerSet
from statementflow.utils.exceptions import ConfigError

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.yaml"


@dataclass
class AppSettings:
    """Application-wide settings loaded from config.yaml."""

    # App info
    app_name: str
    app_version: str

    # Logging
    log_level: str
    log_dir: Optional[str]
    log_max_file_size_mb: int
    log_backup_count: int

    # Processing
    input_dir: str
    output_dir: str
    max_concurrent_documents: int

    # PDF
    pdf_min_text_length: int
    pdf_line_separator: str

    # Output
    csv_delimiter: str
    csv_header: List[str]

    # Parser
    markers: MarkerSet

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "AppSettings":
        """Load settings from YAML file."""
        if config_path is None:
            config_path = DEFAULT_CONFIG_PATH
        config_path = Path(config_path)

        if not config_path.exists():
            raise ConfigError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file is empty or not a mapping: {config_path}")

        try:
            return cls(
                app_name=config["app"]["name"],
                app_version=str(config["app"]["version"]),
                log_level=config["logging"]["level"],
                log_dir=config["logging"].get("log_dir"),
                log_max_file_size_mb=config["logging"]["max_file_size_mb"],
                log_backup_count=config["logging"]["backup_count"],
                input_dir=config["processing"]["input_dir"],
                output_dir=config["processing"]["output_dir"],
                max_concurrent_documents=config["processing"]["max_concurrent_documents"],
                pdf_min_text_length=config["pdf"]["min_text_length"],
                pdf_line_separator=config["pdf"].get("line_separator") or "",
                csv_delimiter=config["output"]["delimiter"],
                csv_header=list(config["output"]["header"]),
                markers=MarkerSet.from_dict(config.get("markers"))
            )
        except (KeyError, TypeError) as e:
            raise ConfigError(f"Missing or malformed setting in {config_path}: {e}") from e

    def validate(self) -> tuple[bool, str]:
        """Validate configuration values."""
        if not isinstance(logging.getLevelName(str(self.log_level).upper()), int):
            return False, f"Unknown log level: {self.log_level}"

        if not self.input_dir:
            return False, "Input directory is required"

        if not self.output_dir:
            return False, "Output directory is required"

        if self.max_concurrent_documents < 1:
            return False, "Max concurrent documents must be at least 1"

        if len(self.csv_delimiter) != 1:
            return False, "CSV delimiter must be a single character"

        if len(self.csv_header) != 3:
            return False, "CSV header must name exactly three columns"

        return True, "Configuration is valid"
