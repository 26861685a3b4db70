from __future__ import annotations

import pytest
from click.testing import CliRunner

from wordrank.cli import CONFIG_ERROR_EXIT, cli
from wordrank.config.settings import LOG_LEVEL_ENV


@pytest.fixture
def runner(monkeypatch) -> CliRunner:
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    return CliRunner()


def test_rank_prints_rank(runner):
    result = runner.invoke(cli, ["rank", "BOOKKEEPER"])
    assert result.exit_code == 0
    assert result.output.strip() == "10743"


def test_rank_explain_shows_steps(runner):
    result = runner.invoke(cli, ["rank", "--explain", "BCA"])
    assert result.exit_code == 0
    assert "Rank of BCA" in result.output
    assert "1 + 3 = 4 (of 6)" in result.output


def test_rank_timing(runner):
    result = runner.invoke(cli, ["rank", "-t", "ABC"])
    assert result.exit_code == 0
    assert "Elapsed time" in result.output


def test_rank_reports_large_rank(runner):
    result = runner.invoke(cli, ["rank", "YXWVUTSRQPONMLKJIHGFEDCBA"])
    assert result.exit_code == 0
    assert "15511210043330985984000000" in result.output
    assert "64-bit" in result.output


@pytest.mark.parametrize(
    "args, code, message",
    [
        ([], 0x08, "too few words"),
        (["ABC", "DEF"], 0x01, "too many words"),
        ([""], 0x04, "too few letters"),
        (["A" * 26], 0x02, "too many letters"),
        (["abc"], 0x10, "not capital letters"),
        (["a" * 26], 0x12, "too many letters"),
    ],
)
def test_rank_invalid_input_exit_status(runner, args, code, message):
    result = runner.invoke(cli, ["rank", *args])
    assert result.exit_code == code
    assert message in result.output
    assert "Please enter just one word consisting of 1-25 capital letters." in result.output


def test_total(runner):
    result = runner.invoke(cli, ["total", "BOOKKEEPER"])
    assert result.exit_code == 0
    assert result.output.strip() == "151200"


def test_total_invalid_input(runner):
    result = runner.invoke(cli, ["total", "Hello"])
    assert result.exit_code == 0x10


def test_info(runner):
    result = runner.invoke(cli, ["info"])
    assert result.exit_code == 0
    assert "10743" in result.output


def test_config_limits_apply(runner, tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("ranking:\n  max_letters: 3\n", encoding="utf-8")

    assert runner.invoke(cli, ["--config", str(path), "rank", "CBA"]).exit_code == 0
    result = runner.invoke(cli, ["--config", str(path), "rank", "DCBA"])
    assert result.exit_code == 0x02
    assert "1-3 capital letters" in result.output


def test_config_output_defaults(runner, tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("output:\n  explain: true\n", encoding="utf-8")
    result = runner.invoke(cli, ["-c", str(path), "rank", "BCA"])
    assert "Rank of BCA" in result.output


def test_bad_config_exit_status(runner, tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("ranking:\n  alphabet: AAB\n", encoding="utf-8")
    result = runner.invoke(cli, ["-c", str(path), "rank", "AB"])
    assert result.exit_code == CONFIG_ERROR_EXIT
    assert "Configuration error" in result.output


def test_verbose_logs_progress(runner):
    result = runner.invoke(cli, ["--verbose", "rank", "BCA"])
    assert result.exit_code == 0
    assert "skipped" in result.output


def test_non_integer_limit_exit_status(runner, tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("ranking:\n  max_letters: lots\n", encoding="utf-8")
    result = runner.invoke(cli, ["-c", str(path), "rank", "AB"])
    assert result.exit_code == CONFIG_ERROR_EXIT
    assert "max_letters" in result.output


@pytest.mark.parametrize("command", ["rank", "total"])
def test_word_starting_with_dash_is_invalid_character(runner, command):
    result = runner.invoke(cli, [command, "-X"])
    assert result.exit_code == 0x10
    assert "'-' is not a valid character." in result.output
    assert "Please enter just one word" in result.output
