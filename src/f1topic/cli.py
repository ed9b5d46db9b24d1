"""Command-line entry point: print the detailed report or the Slack topic."""

from __future__ import annotations

import argparse
import sys

from f1topic.client import F1Client
from f1topic.config import get_settings
from f1topic.log import configure_logging
from f1topic.topic import compact_topic, is_error_topic, topic


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="f1topic",
        description="Show the next F1 race and current championship standings.",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--detailed",
        action="store_true",
        help="Show detailed output (default)",
    )
    output.add_argument(
        "--slack",
        action="store_true",
        help="Show Slack topic format",
    )
    parser.add_argument("--quiet", action="store_true", help="Suppress log messages")
    parser.add_argument("--year", type=int, default=None, help="Season year shown in the header")
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Request timeout in seconds (default: F1TOPIC_TIMEOUT or 30)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(quiet=args.quiet, log_file=settings.log_file)

    timeout = args.timeout if args.timeout is not None else settings.timeout
    with F1Client(timeout=timeout) as client:
        if args.slack:
            rendered = compact_topic(client, year=args.year)
            print(rendered)
            return 1 if is_error_topic(rendered) else 0
        print(topic(client, year=args.year))
    return 0


if __name__ == "__main__":
    sys.exit(main())
