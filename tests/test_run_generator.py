"""Tests for the run_generator CLI entry point."""

import json
from unittest.mock import patch

import pytest

import run_generator
from src.generator import (
    GenerationError,
    GenerationRequest,
    MultiReplyResult,
    ReplyMode,
    SingleReplyResult,
)


@pytest.fixture
def mock_generator():
    with patch("run_generator.ReplyGenerator") as generator_cls, \
            patch("run_generator.load_dotenv"), \
            patch("run_generator.configure_logging"):
        yield generator_cls.return_value


def _run(monkeypatch, *argv: str) -> int:
    monkeypatch.setattr("sys.argv", ["run_generator.py", *argv])
    return run_generator.main()


class TestMain:
    """Tests for main()."""

    def test_multi_reply_default(self, monkeypatch, capsys, mock_generator):
        mock_generator.generate.return_value = MultiReplyResult(
            summary="Lunch invite.", replies=["Yes!", "Sure.", "Sounds great."]
        )

        exit_code = _run(monkeypatch, "--subject", "Lunch", "--body", "Free Friday?", "--tone", "casual")

        assert exit_code == 0
        request = mock_generator.generate.call_args[0][0]
        assert request == GenerationRequest(
            subject="Lunch", body="Free Friday?", tone="casual", mode=ReplyMode.MULTI
        )
        out = capsys.readouterr().out
        assert "Summary: Lunch invite." in out
        assert "--- Reply 3 ---" in out
        assert "Sounds great." in out

    def test_single_reply_json(self, monkeypatch, capsys, mock_generator):
        mock_generator.generate.return_value = SingleReplyResult(summary="S", reply="R")

        exit_code = _run(monkeypatch, "--single", "--language", "de", "--json")

        assert exit_code == 0
        request = mock_generator.generate.call_args[0][0]
        assert request.mode == ReplyMode.SINGLE
        assert request.language == "de"
        assert json.loads(capsys.readouterr().out) == {"summary": "S", "reply": "R"}

    def test_regenerate_flag(self, monkeypatch, mock_generator):
        mock_generator.generate.return_value = MultiReplyResult(summary="S", replies=["a", "b", "c"])
        _run(monkeypatch, "--regenerate")
        assert mock_generator.generate.call_args[0][0].regenerate is True

    def test_body_file(self, monkeypatch, tmp_path, mock_generator):
        body_file = tmp_path / "email.txt"
        body_file.write_text("Body from file", encoding="utf-8")
        mock_generator.generate.return_value = MultiReplyResult(summary="S", replies=["a", "b", "c"])

        _run(monkeypatch, "--body-file", str(body_file))

        assert mock_generator.generate.call_args[0][0].body == "Body from file"

    def test_check_connection(self, monkeypatch, capsys, mock_generator):
        mock_generator.check_connection.return_value = SingleReplyResult(summary="ok", reply="pong")

        exit_code = _run(monkeypatch, "--check-connection")

        assert exit_code == 0
        mock_generator.generate.assert_not_called()
        assert "pong" in capsys.readouterr().out

    def test_generation_error_exit_code(self, monkeypatch, capsys, mock_generator):
        mock_generator.generate.side_effect = GenerationError("Failed to call Gemini API: down")

        exit_code = _run(monkeypatch, "--subject", "x")

        assert exit_code == 1
        assert "ERROR: Failed to call Gemini API: down" in capsys.readouterr().err

    def test_missing_body_file_is_usage_error(self, monkeypatch, tmp_path, capsys, mock_generator):
        missing = tmp_path / "nope.txt"

        with pytest.raises(SystemExit) as exc_info:
            _run(monkeypatch, "--body-file", str(missing))

        assert exc_info.value.code == 2
        assert "cannot read --body-file" in capsys.readouterr().err
        mock_generator.generate.assert_not_called()
