"""Tests for the nextday CLI: stdin/argument input, output and exit codes."""

import json
import warnings
from pathlib import Path

import pytest
from click.testing import CliRunner

from nextday import __version__
from nextday.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "[DAY MONTH YEAR]" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


class TestSuccess:
    @pytest.mark.parametrize(
        ("stdin", "expected"),
        [
            ("31 1 2023", "2023-02-01"),
            ("31 12 2023", "2024-01-01"),
            ("28 2 2024", "2024-02-29"),
            ("29 2 2024", "2024-03-01"),
            ("15 12 2023", "2023-12-16"),
            ("1 1 1538", "1538-01-02"),
        ],
    )
    def test_reads_stdin(self, cli_runner: CliRunner, stdin: str, expected: str) -> None:
        result = cli_runner.invoke(cli, [], input=stdin)
        assert result.exit_code == 0
        assert result.stdout.strip() == expected
        assert result.stderr == ""

    def test_multiline_stdin(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [], input="9\n9\n2009\n")
        assert result.exit_code == 0
        assert result.stdout.strip() == "2009-09-10"

    def test_positional_arguments(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["30", "4", "2023"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "2023-05-01"

    def test_arguments_take_precedence_over_stdin(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["1", "1", "2000"], input="5 5 2005")
        assert result.stdout.strip() == "2000-01-02"

    def test_json_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "31", "12", "2023"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["ok"] is True
        assert data["data"]["date"] == {"day": 1, "month": 1, "year": 2024}


class TestRangeRejection:
    def test_day_32(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [], input="32 1 2023")
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "Day out of range [1,31]" in result.stderr

    def test_all_fields_reported(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [], input="0 13 1537")
        assert result.exit_code == 1
        lines = result.stderr.strip().splitlines()
        assert lines == [
            "Day out of range [1,31]",
            "Month out of range [1,12]",
            "Year out of range [1538,2300]",
        ]

    def test_json_error_on_stderr(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "1", "1", "2301"])
        assert result.exit_code == 1
        assert result.stdout == ""
        data = json.loads(result.stderr)
        assert data["error"]["code"] == "INVALID_RANGE"


class TestCalendarRejection:
    def test_february_30(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [], input="30 2 2023")
        assert result.exit_code == 2
        assert result.stdout == ""
        assert "Month 2 in year 2023 has 28 days" in result.stderr

    def test_leap_day_in_century_year(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [], input="29 2 1900")
        assert result.exit_code == 2


class TestMalformedInput:
    @pytest.mark.parametrize("stdin", ["", "1 2", "one two three", "1 2 3 4", "1_0 1 2000"])
    def test_exit_code(self, cli_runner: CliRunner, stdin: str) -> None:
        result = cli_runner.invoke(cli, [], input=stdin)
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "Expected three integers" in result.stderr


class TestConfiguration:
    def test_toml_bounds(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "nextday.toml").write_text("[bounds.year]\nmin = 1583\n")
        result = cli_runner.invoke(cli, [], input="1 1 1582")
        assert result.exit_code == 1
        assert "Year out of range [1583,2300]" in result.stderr

    def test_config_option(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        cfg = tmp_path / "custom.toml"
        cfg.write_text("[bounds.year]\nmax = 2024\n")
        result = cli_runner.invoke(cli, ["-c", str(cfg), "31", "12", "2025"])
        assert result.exit_code == 1
        assert "Year out of range [1538,2024]" in result.stderr

    def test_env_bounds(self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NEXTDAY_BOUNDS__YEAR__MAX", "3000")
        result = cli_runner.invoke(cli, [], input="31 12 2999")
        assert result.exit_code == 0
        assert result.stdout.strip() == "3000-01-01"


class TestLoggingFlags:
    def test_verbose_logs_to_stderr_only(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-v", "--log-json", "1", "1", "2000"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "2000-01-02"


class TestNegativeArguments:
    def test_negative_month_is_range_failure(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["1", "-1", "2000"])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "Month out of range [1,12]" in result.stderr

    def test_negative_day_before_flags(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "-5", "1", "2000"])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "INVALID_RANGE"

    def test_unknown_long_option_is_malformed_input(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--bogus", "1", "1", "2000"])
        assert result.exit_code == 1
        assert "Expected three integers" in result.stderr


class TestConfigErrors:
    def test_bounds_outside_calendar(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "nextday.toml").write_text("[bounds.month]\nmax = 13\n")
        result = cli_runner.invoke(cli, ["1", "1", "2000"])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.stderr
        assert "Traceback" not in result.stderr

    def test_non_integer_env_bound(
        self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("NEXTDAY_BOUNDS__YEAR__MIN", "abc")
        result = cli_runner.invoke(cli, ["1", "1", "2000"])
        assert result.exit_code == 1
        assert "bounds.year.min" in result.stderr

    def test_missing_config_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["-c", str(tmp_path / "nope.toml"), "1", "1", "2000"])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "Config file not found" in result.stderr

    def test_config_directory_rejected(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["-c", str(tmp_path), "1", "1", "2000"])
        assert result.exit_code == 1
        assert "Cannot read config file" in result.stderr


class TestStdinReading:
    def test_no_deprecation_warning(self, cli_runner: CliRunner) -> None:
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            result = cli_runner.invoke(cli, [], input="1 1 2000")
        assert result.stdout.strip() == "2000-01-02"
        deprecations = [w for w in caught if issubclass(w.category, DeprecationWarning)]
        assert not [w for w in deprecations if "stream" in str(w.message)]
