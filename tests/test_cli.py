"""
Tests for the config inspector CLI.

Run with: python -m pytest tests/test_cli.py -v
"""

import argparse
import json
import logging
import tempfile

import pytest

from http_cache_stream import cli
from http_cache_stream.cli import build_config, main, parse_args, parse_header


class TestParseHeader:
    """Test NAME:VALUE parsing."""

    def test_simple(self):
        assert parse_header("Accept:*/*") == ("Accept", "*/*")

    def test_value_with_colon(self):
        assert parse_header("Referer: http://example.com/") == ("Referer", "http://example.com/")

    @pytest.mark.parametrize("raw", ["Accept", ":value", "  :x"])
    def test_invalid(self, raw):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_header(raw)


class TestBuildConfig:
    """Test building a config from arguments."""

    def test_explicit_cache_dir(self, tmp_path):
        config = build_config(parse_args(["--cache-dir", str(tmp_path)]))
        assert config.cache_directory == tmp_path
        assert config.max_buffer_size == 26214400
        assert config.range_request_split_threshold is None

    def test_default_cache_dir(self, tmp_path, monkeypatch):
        monkeypatch.setattr(cli.settings, "CACHE_DIR", "")
        monkeypatch.setattr(tempfile, "tempdir", str(tmp_path))
        config = build_config(parse_args([]))
        assert config.cache_directory == tmp_path / "http_cache_stream"

    def test_options_applied(self, tmp_path):
        args = parse_args([
            "--cache-dir", str(tmp_path),
            "--max-buffer-size", "2000000",
            "--min-chunk-size", "0",
            "--range-split-threshold", "4096",
            "--copy-cached-headers",
            "--validate-outdated",
            "--request-header", "User-Agent:demo",
            "--response-header", "X-Cache:HIT",
        ])
        config = build_config(args)
        assert config.max_buffer_size == 2000000
        assert config.min_chunk_size == 0
        assert config.range_request_split_threshold == 4096
        assert config.copy_cached_response_headers is True
        assert config.validate_outdated_cache is True
        assert config.request_headers["user-agent"] == "demo"
        assert config.response_headers["x-cache"] == "HIT"


@pytest.fixture
def bare_root_logger():
    """Strip root handlers so setup_logging() installs its own handler."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers = []
    yield root
    for handler in root.handlers:
        handler.close()
    root.handlers = saved_handlers
    root.setLevel(saved_level)


class TestMain:
    """Test main() output and exit codes."""

    def test_prints_json(self, tmp_path, capsys):
        assert main(["--cache-dir", str(tmp_path), "--max-buffer-size", "2000000"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["cache_directory"] == str(tmp_path)
        assert data["max_buffer_size"] == 2000000
        assert data["min_chunk_size"] == 65536
        assert data["request_headers"] == {}

    def test_out_of_range_exits_2(self, tmp_path, capsys, bare_root_logger):
        """Test the error is logged to stderr and stdout stays empty."""
        code = main(["--cache-dir", str(tmp_path), "--max-buffer-size", "500000"])
        captured = capsys.readouterr()
        assert code == 2
        assert captured.out == ""
        assert "Invalid configuration" in captured.err
        assert "max_buffer_size" in captured.err

    def test_debug_output_is_valid_json(self, tmp_path, monkeypatch, capsys, bare_root_logger):
        """Test debug logs do not mix into the JSON on stdout."""
        monkeypatch.setattr(cli.settings, "CACHE_DIR", "")
        monkeypatch.setattr(tempfile, "tempdir", str(tmp_path))
        assert main(["--debug"]) == 0
        captured = capsys.readouterr()
        data = json.loads(captured.out)
        assert data["cache_directory"] == str(tmp_path / "http_cache_stream")
        assert "Resolved default cache directory" in captured.err
        assert "Built DefaultGlobalCacheConfig" in captured.err

    def test_negative_chunk_size_exits_2(self, tmp_path):
        assert main(["--cache-dir", str(tmp_path), "--min-chunk-size", "-1"]) == 2

    def test_bad_header_is_usage_error(self, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            main(["--cache-dir", str(tmp_path), "--request-header", "nocolon"])
        assert exc_info.value.code == 2
