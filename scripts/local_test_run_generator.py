#!/usr/bin/env python3
"""Local smoke test for the reply generator.

Checks that the Gemini settings are present, then drafts a single reply
and three variations for a sample email against the live API.

Run from project root:
    python scripts/local_test_run_generator.py
"""

import os
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent

sys.path.insert(0, str(PROJECT_ROOT))
from dotenv import load_dotenv

load_dotenv(PROJECT_ROOT / ".env")

REQUIRED_ENV_VARS = [
    "GEMINI_API_KEY",
]

OPTIONAL_ENV_VARS = [
    "GEMINI_API_URL",
    "GEMINI_API_ENDPOINT",
    "GEMINI_TIMEOUT",
]


def check_prerequisites() -> list[str]:
    return [
        f"Missing env var: {var}"
        for var in REQUIRED_ENV_VARS
        if not os.environ.get(var)
    ]


def main() -> int:
    print("Checking prerequisites ...\n")
    errors = check_prerequisites()

    if errors:
        for err in errors:
            print(f"  ✗ {err}")
        print(
            "\nSetup instructions:"
            "\n  1. Create an API key in Google AI Studio"
            "\n  2. Set GEMINI_API_KEY in .env or export it"
        )
        return 1

    for var in REQUIRED_ENV_VARS:
        print(f"  ✓ {var}")
    for var in OPTIONAL_ENV_VARS:
        print(f"  {'✓' if os.environ.get(var) else '-'} {var}")

    from src.generator import GenerationError, GenerationRequest, ReplyGenerator

    generator = ReplyGenerator()
    print(f"\nUsing {generator.adapter.provider_name} model {generator.adapter.model_name}\n")

    try:
        print("Step 1: connectivity check (single reply) ...")
        single = generator.check_connection()
        print(f"  summary: {single.summary}")
        print(f"  reply:   {single.reply[:120]}")

        print("\nStep 2: three variations ...")
        request = GenerationRequest(
            subject="Project kickoff moved",
            body="Hi, the kickoff is now on Thursday at 10am. Can you still join?",
            tone="friendly",
        )
        multi = generator.generate_replies(request)
        print(f"  summary: {multi.summary}")
        for number, reply in enumerate(multi.replies, start=1):
            print(f"  reply {number}: {reply[:120]}")
    except GenerationError as e:
        print(f"\nResult: FAIL ({e})")
        return 1

    print("\nResult: PASS")
    return 0


if __name__ == "__main__":
    sys.exit(main())
