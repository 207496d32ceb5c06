"""
Operator command - runs one search from the shell and prints the account once
"""

import argparse
import sys
from typing import List, Optional

from pydantic import ValidationError

from vanity.config import get_settings, validate_search_settings
from vanity.errors import SearchCancelled, SearchTimedOut, VanityError
from vanity.logging_config import setup_logging
from vanity.schemas.criteria import MatchCriteria
from vanity.schemas.result import SearchResult
from vanity.services.search import run_search_sync

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_INVALID = 2
EXIT_FAILED = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vanity",
        description="Search for a mnemonic whose address starts and/or ends with a hex pattern",
    )
    parser.add_argument("--prefix", default="", help="address prefix, starting with 0x (exact case)")
    parser.add_argument("--suffix", default="", help="address suffix (exact case)")
    parser.add_argument("--workers", type=int, default=None, help="worker count (default: policy from settings)")
    parser.add_argument("--timeout", type=float, default=None, help="give up after this many seconds")
    return parser


def print_result(result: SearchResult):
    """Print the account exactly once - never stored"""
    print("\n" + "=" * 60)
    print(f"  ADDRESS: {result.address}")
    print("=" * 60)

    words = result.mnemonic
    for i in range(0, len(words), 3):
        line = "  ".join(f"{i + j + 1:2}. {word:<10}" for j, word in enumerate(words[i:i + 3]))
        print(f"  {line}")

    print("=" * 60)
    print(f"  {result.iterations} iterations, {result.elapsed_seconds:.1f}s")
    print("  WRITE THESE WORDS DOWN. THEY WILL NOT BE SHOWN AGAIN.")
    print("=" * 60 + "\n")


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point"""
    args = build_parser().parse_args(argv)
    settings = get_settings()

    if args.timeout is not None:
        settings = settings.model_copy(update={"SEARCH_TIMEOUT_SECONDS": args.timeout})

    try:
        validate_search_settings(settings)
    except ValueError as exc:
        print(f"[VANITY] ERROR: {exc}")
        sys.exit(EXIT_INVALID)

    setup_logging(settings.LOG_LEVEL)

    try:
        criteria = MatchCriteria(prefix=args.prefix, suffix=args.suffix)
    except ValidationError as exc:
        print("[VANITY] ERROR: Invalid prefix or suffix")
        for error in exc.errors():
            print(f"[VANITY]   {error['msg']}")
        sys.exit(EXIT_INVALID)

    print("[VANITY] Searching...")
    try:
        result = run_search_sync(criteria, args.workers, settings=settings)
    except (SearchTimedOut, SearchCancelled) as exc:
        print(f"[VANITY] No match: {exc}")
        sys.exit(EXIT_NOT_FOUND)
    except KeyboardInterrupt:
        print("[VANITY] No match: search interrupted")
        sys.exit(EXIT_NOT_FOUND)
    except VanityError as exc:
        print(f"[VANITY] ERROR: {type(exc).__name__}: {exc}")
        sys.exit(EXIT_FAILED)

    print_result(result)
    sys.exit(EXIT_OK)
