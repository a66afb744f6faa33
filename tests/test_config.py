"""Tests for configuration management."""

import json

import pytest

from uniprot_lines.config import (
    Config, InputConfig, OutputConfig, ErrorConfig, LoggingConfig,
    create_example_config
)


class TestConfig:
    """Test cases for configuration management."""

    def test_default_config(self):
        """Test default configuration creation."""
        config = Config.default()

        assert config.input.encoding is None
        assert config.output.format == "tsv"
        assert config.output.include_summary is True
        assert config.errors.on_error == "skip"
        assert config.errors.write_error_report is True
        assert config.logging.level == "INFO"
        assert config.logging.log_to_file is False

    def test_config_round_trip(self, tmp_path):
        """Test saving and loading configuration."""
        config = Config.default()
        config.output.format = "json"
        config.errors.on_error = "abort"
        config_file = tmp_path / "config.json"

        config.to_file(config_file)
        loaded = Config.from_file(config_file)

        assert loaded.output.format == "json"
        assert loaded.errors.on_error == "abort"

    def test_partial_config_file(self, tmp_path):
        """Test that missing sections fall back to defaults."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({'output': {'format': 'csv'}}))

        config = Config.from_file(config_file)

        assert config.output.format == "csv"
        assert config.errors == ErrorConfig()
        assert config.input == InputConfig()

    def test_missing_file_gives_defaults(self, tmp_path):
        """Test loading a config file that does not exist."""
        config = Config.from_file(tmp_path / "missing.json")
        assert config.logging == LoggingConfig()

    def test_merge_env_vars(self, monkeypatch):
        """Test environment variable overrides."""
        monkeypatch.setenv('UNIPROT_LINES_ENCODING', 'latin-1')
        monkeypatch.setenv('UNIPROT_LINES_ON_ERROR', 'abort')
        monkeypatch.setenv('UNIPROT_LINES_LOG_LEVEL', 'DEBUG')
        monkeypatch.setenv('UNIPROT_LINES_LOG_DIR', '/tmp/uniprot_logs')

        config = Config.default()
        config.merge_env_vars()

        assert config.input.encoding == 'latin-1'
        assert config.errors.on_error == 'abort'
        assert config.logging.level == 'DEBUG'
        assert config.logging.log_dir == '/tmp/uniprot_logs'
        assert config.logging.log_to_file is True

    def test_merge_cli_args(self):
        """Test CLI argument overrides."""
        config = Config.default()
        config.merge_cli_args(
            output_format='json',
            on_error='abort',
            encoding=None,
            excel_compatible=True,
            no_summary=True
        )

        assert config.output.format == 'json'
        assert config.output.excel_compatible is True
        assert config.output.include_summary is False
        assert config.errors.on_error == 'abort'
        assert config.input.encoding is None

    def test_create_example_config(self, tmp_path):
        """Test example config generation."""
        path = create_example_config(tmp_path / "example.json")

        data = json.loads(path.read_text())
        assert data['input']['encoding'] == 'utf-8'
        assert data['errors']['on_error'] == 'skip'
        assert OutputConfig(**data['output']).format == 'tsv'
