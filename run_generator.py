"""CLI entry point for the email reply generator."""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from src.generator import (
    GenerationError,
    GenerationRequest,
    MultiReplyResult,
    ReplyGenerator,
    ReplyMode,
    SingleReplyResult,
)
from src.logging_config import configure_logging


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Draft replies to an email with an LLM")
    parser.add_argument("--subject", default="", help="Subject of the email to reply to")
    body = parser.add_mutually_exclusive_group()
    body.add_argument("--body", default=None, help="Content of the email to reply to")
    body.add_argument(
        "--body-file",
        type=Path,
        default=None,
        help="Read the email content from a file ('-' for stdin)",
    )
    parser.add_argument("--tone", default=None, help="Reply tone, e.g. professional, casual")
    parser.add_argument("--language", default=None, help="Reply language code (default: en)")
    parser.add_argument(
        "--single",
        action="store_true",
        help="Generate one reply instead of three variations",
    )
    parser.add_argument(
        "--regenerate",
        action="store_true",
        help="Ask for variations different from a previous run",
    )
    parser.add_argument(
        "--check-connection",
        action="store_true",
        help="Generate a reply for a sample email to verify LLM access",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set logging level (overrides LOG_LEVEL env var)",
    )
    return parser


def _read_body(
    parser: argparse.ArgumentParser, body: Optional[str], body_file: Optional[Path]
) -> str:
    if body_file is None:
        return body or ""
    if str(body_file) == "-":
        return sys.stdin.read()
    try:
        return body_file.read_text(encoding="utf-8")
    except OSError as e:
        parser.error(f"cannot read --body-file {body_file}: {e.strerror or e}")


def _print_result(result, as_json: bool) -> None:
    if as_json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        return

    print(f"Summary: {result.summary}\n")
    if isinstance(result, MultiReplyResult):
        for number, reply in enumerate(result.replies, start=1):
            print(f"--- Reply {number} ---")
            print(reply)
            print()
    elif isinstance(result, SingleReplyResult):
        print("--- Reply ---")
        print(result.reply)


def main() -> int:
    load_dotenv()

    parser = _build_parser()
    args = parser.parse_args()
    configure_logging(level_override=args.log_level)

    generator = ReplyGenerator()
    try:
        if args.check_connection:
            result = generator.check_connection()
        else:
            request = GenerationRequest(
                subject=args.subject,
                body=_read_body(parser, args.body, args.body_file),
                tone=args.tone,
                language=args.language,
                mode=ReplyMode.SINGLE if args.single else ReplyMode.MULTI,
                regenerate=args.regenerate,
            )
            result = generator.generate(request)
    except GenerationError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    _print_result(result, args.json)
    return 0


if __name__ == "__main__":
    sys.exit(main())
