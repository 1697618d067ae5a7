"""Tests for the CLI module."""

import json
import logging
from unittest.mock import MagicMock, patch

import pytest

from archive_fixtures.cli import (
    COUNT_PROMPT,
    OUTPUT_PROMPT,
    main,
    parse_count,
    parse_output_dir,
    prompt_until_valid,
)
from archive_fixtures.exceptions import FilesystemError, InputError


def _answers(*values):
    """Build an input() replacement that replays values, then hits end of input."""
    replies = iter(values)
    prompts = []

    def fake_input(prompt=""):
        prompts.append(prompt)
        try:
            return next(replies)
        except StopIteration:
            raise EOFError from None

    fake_input.prompts = prompts
    return fake_input


@pytest.fixture
def small_limits_file(tmp_path):
    path = tmp_path / "limits.json"
    path.write_text(json.dumps({"page_count": [1, 3], "words_per_page": [1, 5]}))
    return path


class TestParseCount:
    """Tests for count parsing."""

    @pytest.mark.parametrize("text,expected", [("0", 0), ("3", 3), (" 12 \n", 12)])
    def test_accepts_non_negative_integers(self, text, expected):
        """Zero and positive integers are accepted."""
        assert parse_count(text) == expected

    @pytest.mark.parametrize("text", ["", "abc", "1.5", "two"])
    def test_rejects_non_integers(self, text):
        """Non-integer input raises InputError."""
        with pytest.raises(InputError, match="Not a whole number"):
            parse_count(text)

    def test_rejects_negative(self):
        """Negative numbers raise InputError."""
        with pytest.raises(InputError, match="zero or a positive"):
            parse_count("-4")


class TestParseOutputDir:
    """Tests for output directory parsing."""

    def test_accepts_existing_directory(self, tmp_path):
        """An existing directory is returned as a Path."""
        assert parse_output_dir(f" {tmp_path} \n") == tmp_path

    def test_rejects_missing_path(self, tmp_path):
        """A path that does not exist raises InputError."""
        with pytest.raises(InputError, match="Not an existing directory"):
            parse_output_dir(str(tmp_path / "missing"))

    def test_rejects_file(self, tmp_path):
        """A regular file raises InputError."""
        path = tmp_path / "file.txt"
        path.write_text("x")
        with pytest.raises(InputError):
            parse_output_dir(str(path))

    def test_rejects_empty(self):
        """Blank input raises InputError."""
        with pytest.raises(InputError, match="No output directory"):
            parse_output_dir("   ")


class TestPromptUntilValid:
    """Tests for the reprompting loop."""

    def test_reprompts_until_valid(self, caplog):
        """Invalid answers are logged and the prompt repeats."""
        fake_input = _answers("x", "-1", "4")
        with patch("builtins.input", fake_input):
            assert prompt_until_valid(COUNT_PROMPT, parse_count) == 4

        assert fake_input.prompts == [COUNT_PROMPT] * 3
        assert "Not a whole number" in caplog.text
        assert "zero or a positive" in caplog.text

    def test_end_of_input_propagates(self):
        """EOFError ends the loop."""
        with patch("builtins.input", _answers("nope")):
            with pytest.raises(EOFError):
                prompt_until_valid(COUNT_PROMPT, parse_count)


class TestCLIInteractive:
    """Tests for interactive runs."""

    def test_prompts_for_count_then_output(self, tmp_path, small_limits_file, capsys):
        """Count is asked for before the output directory."""
        fake_input = _answers("2", str(tmp_path))
        with patch("builtins.input", fake_input):
            result = main(["--limits", str(small_limits_file)])

        assert result == 0
        assert fake_input.prompts == [COUNT_PROMPT, OUTPUT_PROMPT]
        assert (tmp_path / "publication-1").is_dir()
        assert (tmp_path / "publication-2").is_dir()
        assert "Done" in capsys.readouterr().out

    def test_reprompts_for_bad_answers(self, tmp_path, small_limits_file, caplog):
        """Bad counts and paths are rejected until valid ones are given."""
        fake_input = _answers(
            "many", "-2", "1",
            str(tmp_path / "missing"), str(tmp_path),
        )
        with patch("builtins.input", fake_input):
            result = main(["--limits", str(small_limits_file)])

        assert result == 0
        assert fake_input.prompts == [COUNT_PROMPT] * 3 + [OUTPUT_PROMPT] * 2
        assert "Not an existing directory" in caplog.text
        assert (tmp_path / "publication-1" / "images" / "1.tif").exists()

    def test_zero_count(self, tmp_path, capsys):
        """A count of zero generates nothing and succeeds."""
        with patch("builtins.input", _answers("0", str(tmp_path))):
            result = main([])

        assert result == 0
        assert list(tmp_path.iterdir()) == []
        assert "Done" in capsys.readouterr().out

    def test_end_of_input_returns_error(self, tmp_path, caplog):
        """Running out of console input returns a non-zero exit code."""
        with patch("builtins.input", _answers("abc")):
            result = main([])

        assert result == 1
        assert "No more console input" in caplog.text
        assert list(tmp_path.iterdir()) == []

    def test_only_missing_values_are_prompted(self, tmp_path, small_limits_file):
        """--count skips the count prompt."""
        fake_input = _answers(str(tmp_path))
        with patch("builtins.input", fake_input):
            result = main(["--count", "1", "--limits", str(small_limits_file)])

        assert result == 0
        assert fake_input.prompts == [OUTPUT_PROMPT]


class TestCLIOptions:
    """Tests for non-interactive runs."""

    def test_count_and_output_flags(self, tmp_path, small_limits_file):
        """With both flags no prompt is shown."""
        fake_input = _answers()
        with patch("builtins.input", fake_input):
            result = main([
                "--count", "3",
                "--output", str(tmp_path),
                "--limits", str(small_limits_file),
            ])

        assert result == 0
        assert fake_input.prompts == []
        assert sorted(p.name for p in tmp_path.iterdir() if p.is_dir()) == [
            "publication-1",
            "publication-2",
            "publication-3",
        ]

    def test_seed_makes_runs_reproducible(self, tmp_path, small_limits_file):
        """The same --seed writes the same documents."""
        first, second = tmp_path / "a", tmp_path / "b"
        first.mkdir()
        second.mkdir()
        for out in (first, second):
            main([
                "--count", "1",
                "--output", str(out),
                "--seed", "7",
                "--limits", str(small_limits_file),
            ])

        for name in ("publication.xml", "fulltext.xml"):
            assert (first / "publication-1" / name).read_bytes() == (
                second / "publication-1" / name
            ).read_bytes()

    def test_rejects_negative_count_flag(self, tmp_path):
        """A negative --count is a usage error."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--count", "-1", "--output", str(tmp_path)])
        assert exc_info.value.code != 0

    def test_rejects_missing_output_flag(self, tmp_path):
        """--output must name an existing directory."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--count", "1", "--output", str(tmp_path / "missing")])
        assert exc_info.value.code != 0

    def test_invalid_limits_file(self, tmp_path, caplog):
        """A limits file with an empty range returns an error code."""
        limits = tmp_path / "limits.json"
        limits.write_text(json.dumps({"page_count": [5, 1]}))

        result = main(["--count", "1", "--output", str(tmp_path), "--limits", str(limits)])

        assert result == 1
        assert "Failed to load limits" in caplog.text

    def test_missing_limits_file(self, tmp_path, caplog):
        """An unreadable limits file returns an error code."""
        result = main([
            "--count", "1",
            "--output", str(tmp_path),
            "--limits", str(tmp_path / "nope.json"),
        ])
        assert result == 1
        assert "Failed to load limits" in caplog.text

    def test_publication_errors_still_succeed(self, tmp_path, small_limits_file, caplog):
        """Per-publication failures are logged but the run exits 0."""
        (tmp_path / "publication-1").write_text("blocker")

        result = main([
            "--count", "2",
            "--output", str(tmp_path),
            "--limits", str(small_limits_file),
        ])

        assert result == 0
        assert "Failed to generate publication 1" in caplog.text
        assert "Errors: 1" in caplog.text
        assert (tmp_path / "publication-2").is_dir()

    @patch("archive_fixtures.cli.ArchiveGenerator")
    def test_generator_setup_failure(self, mock_generator_class, tmp_path, caplog):
        """A FilesystemError from the generator returns an error code."""
        mock_generator = MagicMock()
        mock_generator.generate.side_effect = FilesystemError("Output directory not found: x")
        mock_generator_class.return_value = mock_generator

        result = main(["--count", "1", "--output", str(tmp_path)])

        assert result == 1
        assert "Failed to generate publications" in caplog.text

    @patch("archive_fixtures.cli.ArchiveGenerator")
    def test_passes_count_and_output(self, mock_generator_class, tmp_path, caplog):
        """The parsed count and output directory reach the generator."""
        caplog.set_level(logging.INFO)
        mock_generator = MagicMock()
        mock_generator.generate.return_value.written = 4
        mock_generator.generate.return_value.requested = 4
        mock_generator.generate.return_value.errors = []
        mock_generator_class.return_value = mock_generator

        result = main(["--count", "4", "--output", str(tmp_path)])

        assert result == 0
        assert mock_generator_class.call_args.args[0] == tmp_path
        mock_generator.generate.assert_called_once_with(4)
        assert "Publications written: 4 of 4" in caplog.text
