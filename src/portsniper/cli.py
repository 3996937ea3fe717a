"""Command-line entry point: ``portsniper --port <PORT>``."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import NoReturn, Optional, Sequence

from .config import ConfigurationError, load_settings
from .logging_config import setup_logging
from .process_killer import EXIT_FAILURE, EXIT_INTERRUPTED, snipe_port

logger = logging.getLogger(__name__)

PROG = "portsniper"
USAGE_MESSAGE = f"❌ Usage: {PROG} --port <PORT>"


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(EXIT_FAILURE, f"❌ {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=PROG,
        description="Find the process listening on a TCP port and terminate it.",
    )
    parser.add_argument("--port", help="TCP port to inspect (1-65535)")
    parser.add_argument("-y", "--yes", action="store_true", help="terminate without asking for confirmation")
    parser.add_argument(
        "--force",
        action="store_true",
        help="send SIGKILL if the process ignores SIGTERM",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        metavar="SECONDS",
        help="seconds to wait for the process to exit after SIGTERM (0 = do not wait)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log diagnostic details to stderr")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    if not args.port:
        print(USAGE_MESSAGE, file=sys.stderr)
        return EXIT_FAILURE

    try:
        settings = load_settings().with_overrides(
            graceful_timeout=args.timeout,
            assume_yes=args.yes,
            force=args.force,
        )
        setup_logging(verbose=args.verbose, log_file=settings.log_file)
    except (ConfigurationError, OSError) as exc:
        print(f"❌ {exc}", file=sys.stderr)
        return EXIT_FAILURE

    logger.debug("Settings: %s", settings)
    try:
        return snipe_port(args.port, settings=settings)
    except KeyboardInterrupt:
        # The prompt line has no trailing newline
        print()
        print("❎ Operation cancelled by user.")
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    sys.exit(main())
