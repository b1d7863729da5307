"""Tests for the command line interface."""

from unittest.mock import patch

import pytest
from click.testing import CliRunner

from searchlight.cli import cli
from searchlight.config import SearchLightConfig, save_config


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "config.yaml"
    save_config(SearchLightConfig(), path)
    return path


class TestFindCommand:
    """Test the find command."""

    def test_markup_output(self, runner, config_path):
        """Test printing raw markup for a literal query."""
        result = runner.invoke(cli, ["--config", str(config_path), "find", "abcd", "--markup"])

        assert result.exit_code == 0
        assert result.output.splitlines() == ["<b>abcd</b>", "<b>abcd</b><b>abcd</b>"]

    def test_regex_markup_output(self, runner, config_path):
        """Test printing raw markup for a regex query."""
        result = runner.invoke(cli, ["--config", str(config_path), "find", "a.c", "--regex", "--markup"])

        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "<b>abc</b>",
            "<b>abc</b>d",
            "<b>abc</b><b>abc</b>",
            "<b>abc</b>d<b>abc</b>d",
        ]

    def test_literal_by_default(self, runner, config_path):
        """Test that queries are literal unless regex is requested."""
        result = runner.invoke(cli, ["--config", str(config_path), "find", "a.c", "--markup"])

        assert result.exit_code == 0
        assert result.output == ""

    def test_regex_default_from_config(self, runner, tmp_path):
        """Test that the configured regex default is used."""
        path = tmp_path / "config.yaml"
        save_config(SearchLightConfig(search={"regex_enabled": True}), path)

        result = runner.invoke(cli, ["--config", str(path), "find", "^ab$", "--markup"])

        assert result.output.splitlines() == ["<b>ab</b>"]

    def test_table_output(self, runner, config_path):
        """Test the table summary."""
        result = runner.invoke(cli, ["--config", str(config_path), "find", "a.c", "--regex"])

        assert result.exit_code == 0
        assert "abcdabcd" in result.output
        assert "4 of 8 candidates matched" in result.output

    def test_no_matches(self, runner, config_path):
        """Test the message shown when nothing matches."""
        result = runner.invoke(cli, ["--config", str(config_path), "find", "zzz"])

        assert result.exit_code == 0
        assert "No matches" in result.output

    def test_invalid_regex(self, runner, config_path):
        """Test that a malformed regex is reported, not raised."""
        result = runner.invoke(cli, ["--config", str(config_path), "find", "[", "--regex"])

        assert result.exit_code == 0
        assert result.exception is None
        assert "Invalid query" in result.output

    def test_empty_query_policy(self, runner, config_path):
        """Test overriding the empty query policy."""
        everything = runner.invoke(cli, ["--config", str(config_path), "find", "--markup"])
        nothing = runner.invoke(cli, ["--config", str(config_path), "find", "--empty-query", "none", "--markup"])

        assert len(everything.output.splitlines()) == 8
        assert nothing.output == ""

    def test_candidates_file(self, runner, config_path, tmp_path):
        """Test searching candidates read from a file."""
        words = tmp_path / "words.txt"
        words.write_text("x < y\nfoo\n")

        result = runner.invoke(cli, ["--config", str(config_path), "find", "<", "--file", str(words), "--markup"])

        assert result.exit_code == 0
        assert result.output.splitlines() == ["x <b>&lt;</b> y"]

    def test_undecodable_candidates_file(self, runner, config_path, tmp_path):
        """Test that a file that is not UTF-8 is reported, not raised."""
        words = tmp_path / "words.txt"
        words.write_bytes(b"ab\xff\n")

        result = runner.invoke(cli, ["--config", str(config_path), "find", "ab", "--file", str(words)])

        assert result.exit_code == 1
        assert not isinstance(result.exception, UnicodeDecodeError)
        assert "Could not read candidates" in result.output


class TestOtherCommands:
    """Test candidate and configuration commands."""

    def test_candidates(self, runner, config_path):
        """Test listing the configured candidates."""
        result = runner.invoke(cli, ["--config", str(config_path), "candidates"])

        assert result.exit_code == 0
        assert result.output.split() == ["a", "ab", "abc", "abcd", "aa", "abab", "abcabc", "abcdabcd"]

    def test_candidates_undecodable_file(self, runner, config_path, tmp_path):
        """Test listing candidates from a file that is not UTF-8."""
        words = tmp_path / "words.txt"
        words.write_bytes(b"\xff")

        result = runner.invoke(cli, ["--config", str(config_path), "candidates", "--file", str(words)])

        assert result.exit_code == 1
        assert "Could not read candidates" in result.output

    def test_invalid_config(self, runner, tmp_path):
        """Test that an invalid configuration file exits with an error."""
        path = tmp_path / "config.yaml"
        path.write_text("search:\n  empty_query: sometimes\n")

        result = runner.invoke(cli, ["--config", str(path), "candidates"])

        assert result.exit_code == 1
        assert "Invalid configuration" in result.output

    @patch("searchlight.cli.get_config")
    def test_config_show(self, mock_get_config, runner):
        """Test showing the active configuration."""
        mock_get_config.return_value = SearchLightConfig(candidates=["only"])

        result = runner.invoke(cli, ["config", "show"])

        assert result.exit_code == 0
        assert "- only" in result.output
        assert "empty_query: all" in result.output
        mock_get_config.assert_called_once()

    def test_config_init(self, runner, tmp_path):
        """Test writing a default configuration."""
        path = tmp_path / "searchlight" / "config.yaml"

        result = runner.invoke(cli, ["config", "init", "--path", str(path)])

        assert result.exit_code == 0
        assert path.exists()

        again = runner.invoke(cli, ["config", "init", "--path", str(path)])
        assert again.exit_code == 1
        assert "already exists" in again.output

        forced = runner.invoke(cli, ["config", "init", "--path", str(path), "--force"])
        assert forced.exit_code == 0
