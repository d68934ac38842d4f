"""
Tests for the command-line entry point and environment configuration.
"""

import io

import pytest
from digitcode import cli
from digitcode.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("DIGITCODE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("DIGITCODE_OUTPUT_FORMAT", raising=False)


def run(monkeypatch, text, argv=None):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    return cli.main([] if argv is None else argv)


class TestSettings:
    """Test DIGITCODE_* environment settings."""

    def test_defaults(self):
        settings = Settings()
        assert settings.log_level == "WARNING"
        assert settings.output_format == "tsv"

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("DIGITCODE_OUTPUT_FORMAT", "yaml")
        monkeypatch.setenv("DIGITCODE_LOG_LEVEL", "DEBUG")
        settings = Settings()
        assert settings.output_format == "yaml"
        assert settings.log_level == "DEBUG"


class TestMain:
    """Test exit statuses and streams."""

    def test_success(self, monkeypatch, capsys):
        status = run(monkeypatch, "decimal 42.35\ndecimal 7\n")
        captured = capsys.readouterr()
        assert status == cli.EXIT_OK
        assert captured.out.splitlines() == [
            "4 2 . 3 5\t0100 0010 . 0011 0101\t0100 0010 . 0011 1011\t0111 0101 . 0110 1000",
            "7\t0111\t1101\t1010",
        ]

    def test_empty_stdin(self, monkeypatch, capsys):
        assert run(monkeypatch, "") == cli.EXIT_OK
        assert capsys.readouterr().out == ""

    @pytest.mark.parametrize("argv", [["foo"], ["-h"], ["--help"], ["decimal", "5"]])
    def test_any_argument_is_usage_error(self, monkeypatch, capsys, argv):
        stdin = io.StringIO("decimal 1\n")
        monkeypatch.setattr("sys.stdin", stdin)
        assert cli.main(argv) == cli.EXIT_USAGE
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "usage: digitcode" in captured.err
        assert stdin.tell() == 0

    def test_failure_stops_batch(self, monkeypatch, capsys):
        status = run(monkeypatch, "decimal 1\ndecimal 4a\ndecimal 2\n")
        captured = capsys.readouterr()
        assert status == cli.EXIT_FAILURE
        assert captured.out == "1\t0001\t0001\t0100\n"
        assert "InvalidDigit" in captured.err
        assert "'a'" in captured.err

    @pytest.mark.parametrize("level", ["CRITICAL", "ERROR", "DEBUG"])
    def test_diagnostic_reaches_stderr_at_any_log_level(self, monkeypatch, capsys, level):
        """The fatal message is written to stderr whatever the log level."""
        monkeypatch.setenv("DIGITCODE_LOG_LEVEL", level)
        assert run(monkeypatch, "decimal 4a\n") == cli.EXIT_FAILURE
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "digitcode: error: InvalidDigit" in captured.err

    @pytest.mark.parametrize("text, error", [
        ("foo 5\n", "UnknownEncoding"),
        ("decimal\n", "MalformedRecord"),
        ("aiken 0101\n", "InvalidCodeword"),
    ])
    def test_error_kinds(self, monkeypatch, capsys, text, error):
        assert run(monkeypatch, text) == cli.EXIT_FAILURE
        assert error in capsys.readouterr().err

    def test_json_output_format(self, monkeypatch, capsys):
        monkeypatch.setenv("DIGITCODE_OUTPUT_FORMAT", "json")
        assert run(monkeypatch, "stibitz 1100\n") == cli.EXIT_OK
        assert capsys.readouterr().out == '{"aiken": "1111", "bcd": "1001", "decimal": "9", "stibitz": "1100"}\n'

    def test_invalid_setting_is_usage_error(self, monkeypatch, capsys):
        monkeypatch.setenv("DIGITCODE_OUTPUT_FORMAT", "xml")
        assert run(monkeypatch, "decimal 1\n") == cli.EXIT_USAGE
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "invalid configuration" in captured.err
