"""Configuration management for uniprot-lines."""

import json
import os
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional


@dataclass
class InputConfig:
    """Input file settings."""
    encoding: Optional[str] = None  # auto-detect


@dataclass
class OutputConfig:
    """Output configuration settings."""
    format: str = "tsv"
    excel_compatible: bool = False
    include_summary: bool = True


@dataclass
class ErrorConfig:
    """Handling of malformed entries."""
    on_error: str = "skip"
    write_error_report: bool = True


@dataclass
class LoggingConfig:
    """Logging configuration settings."""
    level: str = "INFO"
    log_dir: str = ".uniprot_lines_logs"
    log_to_file: bool = False


@dataclass
class Config:
    """Main configuration container."""
    input: InputConfig
    output: OutputConfig
    errors: ErrorConfig
    logging: LoggingConfig

    @classmethod
    def default(cls) -> 'Config':
        """Create default configuration."""
        return cls(
            input=InputConfig(),
            output=OutputConfig(),
            errors=ErrorConfig(),
            logging=LoggingConfig()
        )

    @classmethod
    def from_file(cls, path: Path) -> 'Config':
        """Load configuration from JSON file."""
        if not path.exists():
            return cls.default()

        with open(path, 'r') as f:
            data = json.load(f)

        return cls(
            input=InputConfig(**data.get('input', {})),
            output=OutputConfig(**data.get('output', {})),
            errors=ErrorConfig(**data.get('errors', {})),
            logging=LoggingConfig(**data.get('logging', {}))
        )

    def to_file(self, path: Path) -> None:
        """Save configuration to JSON file."""
        path.parent.mkdir(parents=True, exist_ok=True)

        data = {
            'input': asdict(self.input),
            'output': asdict(self.output),
            'errors': asdict(self.errors),
            'logging': asdict(self.logging)
        }

        with open(path, 'w') as f:
            json.dump(data, f, indent=2)

    def merge_env_vars(self) -> None:
        """Merge environment variables into configuration."""
        if os.getenv('UNIPROT_LINES_ENCODING'):
            self.input.encoding = os.getenv('UNIPROT_LINES_ENCODING')
        if os.getenv('UNIPROT_LINES_ON_ERROR'):
            self.errors.on_error = os.getenv('UNIPROT_LINES_ON_ERROR')

        # Logging
        if os.getenv('UNIPROT_LINES_LOG_LEVEL'):
            self.logging.level = os.getenv('UNIPROT_LINES_LOG_LEVEL')
        if os.getenv('UNIPROT_LINES_LOG_DIR'):
            self.logging.log_dir = os.getenv('UNIPROT_LINES_LOG_DIR')
            self.logging.log_to_file = True

    def merge_cli_args(self, **kwargs) -> None:
        """Merge CLI arguments into configuration."""
        if kwargs.get('encoding'):
            self.input.encoding = kwargs['encoding']

        if kwargs.get('output_format'):
            self.output.format = kwargs['output_format']
        if kwargs.get('excel_compatible'):
            self.output.excel_compatible = True
        if kwargs.get('no_summary'):
            self.output.include_summary = False

        if kwargs.get('on_error'):
            self.errors.on_error = kwargs['on_error']

        if kwargs.get('log_file'):
            self.logging.log_to_file = True


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    locations = [
        Path.home() / '.uniprot_lines' / 'config.json',
        Path.home() / '.config' / 'uniprot_lines' / 'config.json',
        Path('.uniprot_lines.json'),
        Path('uniprot_lines.config.json')
    ]

    for path in locations:
        if path.exists():
            return path

    return Path.home() / '.uniprot_lines' / 'config.json'


def create_example_config(path: Optional[Path] = None) -> Path:
    """Create an example configuration file."""
    if path is None:
        path = Path('uniprot_lines.config.example.json')

    config = Config.default()
    config.input.encoding = "utf-8"
    config.output.format = "tsv"
    config.errors.on_error = "skip"

    config.to_file(path)
    return path
