"""Command-line interface for grammar checking and simplification.

Reads the text from an argument, a file, or standard input, sends it for
analysis, and prints the result. Optionally saves the corrected or simplified
text to a timestamped file.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from tahrirchi.config import load_settings
from tahrirchi.llm.analyzer import TextAnalyzer
from tahrirchi.models import Language, Operation
from tahrirchi.presentation import (
    AnalysisSession,
    Analyzer,
    render_result,
    write_result_file,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tahrirchi",
        description="Check grammar or simplify text using Gemini.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Proofread English text
  python -m tahrirchi "I has a apple."

  # Simplify an Uzbek text file and save the result
  python -m tahrirchi --file essay.txt --language UZ --operation simplify --output-dir results

  # Read from standard input and print the validated JSON
  cat notes.txt | python -m tahrirchi --json

Environment Variables:
  GEMINI_API_KEY          API key for Gemini (API_KEY is also accepted)
  TAHRIRCHI_MODEL         Model identifier (default: gemini-2.5-flash)
  TAHRIRCHI_TEMPERATURE   Sampling temperature (default: 0.2)
        """,
    )
    parser.add_argument(
        "text",
        nargs="?",
        help="Text to analyse. Omit to read from --file or standard input.",
    )
    parser.add_argument(
        "--file",
        type=Path,
        help="Read the text to analyse from this file (UTF-8).",
    )
    parser.add_argument(
        "-l",
        "--language",
        default=Language.EN.value,
        type=str.upper,
        choices=Language.all_values(),
        help="Language of the text (default: EN).",
    )
    parser.add_argument(
        "--operation",
        default=Operation.GRAMMAR.value,
        choices=Operation.all_values(),
        help="Analysis to perform (default: grammar).",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Save the corrected or simplified text to a timestamped file in this directory.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the validated result as JSON instead of formatted text.",
    )
    parser.add_argument(
        "--dotenv",
        type=Path,
        default=None,
        help="Path to a .env file to load before reading configuration.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity (default: WARNING).",
    )
    return parser


def _read_input(args: argparse.Namespace, parser: argparse.ArgumentParser) -> str:
    if args.text is not None and args.file is not None:
        parser.error("Provide either TEXT or --file, not both")
    if args.file is not None:
        try:
            return args.file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            parser.error(f"Could not read {args.file}: {exc}")
    if args.text is not None:
        return args.text
    if sys.stdin.isatty():
        parser.error("No text provided. Pass TEXT, --file, or pipe text on stdin")
    return sys.stdin.read()


def run(args: argparse.Namespace, text: str, analyzer: Analyzer) -> int:
    session = AnalysisSession(analyzer)
    result = asyncio.run(session.invoke(text, args.language, args.operation))

    if result is None:
        print(f"Error: {session.error}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(result.model_dump(mode="json", by_alias=True), ensure_ascii=False, indent=2))
    else:
        print(render_result(result))

    if args.output_dir is not None:
        path = write_result_file(result, args.output_dir)
        print(f"Saved to {path}", file=sys.stderr)
    return 0


def main(argv: list[str] | None = None, *, analyzer: Analyzer | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level))

    text = _read_input(args, parser)
    if analyzer is None:
        analyzer = TextAnalyzer.from_settings(load_settings(args.dotenv))
    return run(args, text, analyzer)


if __name__ == "__main__":
    sys.exit(main())
