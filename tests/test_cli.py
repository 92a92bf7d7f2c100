"""Tests for the command-line front end."""

from __future__ import annotations

import io
import json
import sys
from pathlib import Path
from typing import Any

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from tahrirchi.cli import build_parser, main
from tahrirchi.llm.errors import BackendUnavailable, ConfigurationError
from tahrirchi.models import GrammarError, GrammarResult, Language, Operation, SimplifyResult


class _StubAnalyzer:
    def __init__(self, outcome: Any) -> None:
        self.outcome = outcome
        self.calls: list[tuple[str, Any, Any]] = []

    async def analyze_text(self, text: str, language: Any, operation: Any) -> Any:
        self.calls.append((text, language, operation))
        if isinstance(self.outcome, Exception):
            raise self.outcome
        return self.outcome


GRAMMAR_RESULT = GrammarResult(
    correctedText="I have an apple.",
    errors=[
        GrammarError(
            offset=2,
            length=3,
            original="has",
            suggestion="have",
            explanation="subject-verb agreement",
        )
    ],
)


def test_parser_defaults() -> None:
    args = build_parser().parse_args(["Hello"])

    assert args.text == "Hello"
    assert args.language == Language.EN.value
    assert args.operation == Operation.GRAMMAR.value
    assert args.output_dir is None
    assert not args.json


def test_language_is_case_insensitive() -> None:
    args = build_parser().parse_args(["Hello", "--language", "uz"])

    assert args.language == "UZ"


def test_unknown_operation_is_a_usage_error() -> None:
    with pytest.raises(SystemExit) as exc_info:
        build_parser().parse_args(["Hello", "--operation", "translate"])

    assert exc_info.value.code == 2


def test_prints_rendered_result(capsys: pytest.CaptureFixture[str]) -> None:
    analyzer = _StubAnalyzer(GRAMMAR_RESULT)

    exit_code = main(["I has a apple."], analyzer=analyzer)

    assert exit_code == 0
    assert analyzer.calls == [("I has a apple.", "EN", "grammar")]
    out = capsys.readouterr().out
    assert "I have an apple." in out
    assert "has -> have" in out


def test_json_output_uses_wire_names(capsys: pytest.CaptureFixture[str]) -> None:
    result = SimplifyResult(simplifiedText="Easy words.", summary="Shorter sentences.")

    exit_code = main(["Hard words.", "--operation", "simplify", "--json"], analyzer=_StubAnalyzer(result))

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload == {
        "operation": "simplify",
        "simplifiedText": "Easy words.",
        "summary": "Shorter sentences.",
    }


def test_reads_text_from_file(tmp_path: Path) -> None:
    source = tmp_path / "input.txt"
    source.write_text("Men olma yedim", encoding="utf-8")
    analyzer = _StubAnalyzer(GRAMMAR_RESULT)

    assert main(["--file", str(source), "-l", "UZ"], analyzer=analyzer) == 0
    assert analyzer.calls == [("Men olma yedim", "UZ", "grammar")]


def test_reads_text_from_stdin(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sys, "stdin", io.StringIO("I has a apple.\n"))
    analyzer = _StubAnalyzer(GRAMMAR_RESULT)

    assert main([], analyzer=analyzer) == 0
    assert analyzer.calls[0][0] == "I has a apple.\n"


def test_text_and_file_together_is_a_usage_error(tmp_path: Path) -> None:
    source = tmp_path / "input.txt"
    source.write_text("x", encoding="utf-8")

    with pytest.raises(SystemExit) as exc_info:
        main(["Hello", "--file", str(source)], analyzer=_StubAnalyzer(GRAMMAR_RESULT))

    assert exc_info.value.code == 2


def test_output_dir_saves_primary_text(tmp_path: Path) -> None:
    out_dir = tmp_path / "results"

    assert main(["I has a apple.", "--output-dir", str(out_dir)], analyzer=_StubAnalyzer(GRAMMAR_RESULT)) == 0

    files = list(out_dir.glob("toolkit-result-*.txt"))
    assert len(files) == 1
    assert files[0].read_text(encoding="utf-8") == "I have an apple."


def test_analysis_error_exits_with_message(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["Hello"], analyzer=_StubAnalyzer(BackendUnavailable()))

    assert exit_code == 1
    assert BackendUnavailable.default_message in capsys.readouterr().err


def test_blank_text_exits_without_calling_analyzer(capsys: pytest.CaptureFixture[str]) -> None:
    analyzer = _StubAnalyzer(GRAMMAR_RESULT)

    assert main(["   "], analyzer=analyzer) == 1
    assert analyzer.calls == []
    assert "Please enter some text first." in capsys.readouterr().err


def test_missing_api_key_reports_configuration_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("API_KEY", raising=False)
    dotenv_path = tmp_path / ".env"
    dotenv_path.write_text("", encoding="utf-8")

    exit_code = main(["Hello", "--dotenv", str(dotenv_path)])

    assert exit_code == 1
    err = capsys.readouterr().err
    assert "GEMINI_API_KEY" in err
    assert ConfigurationError("GEMINI_API_KEY").user_message in err


def test_non_utf8_file_is_a_usage_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "input.txt"
    source.write_bytes(b"\xff\xfe not utf-8")
    analyzer = _StubAnalyzer(GRAMMAR_RESULT)

    with pytest.raises(SystemExit) as exc_info:
        main(["--file", str(source)], analyzer=analyzer)

    assert exc_info.value.code == 2
    assert analyzer.calls == []
    assert "Could not read" in capsys.readouterr().err
