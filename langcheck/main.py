"""Command line entry point for the translation key consistency checker."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import structlog

from langcheck import __version__
from langcheck.config import DEFAULT_LANG_DIR, CheckerSettings, load_config
from langcheck.errors import InconsistentKeysError, LangCheckError
from langcheck.localization import CheckResult, ConsistencyChecker

SUCCESS_MESSAGE = "All translation files are consistent"
INCONSISTENT_MESSAGE = "Translation files have inconsistent keys"


def setup_logging(debug: bool = False, verbose: bool = False) -> None:
    """Configure structured logging on stderr."""
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    # stdout is reserved for the result line
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))

    logging.basicConfig(
        level=level,
        handlers=[handler],
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            (
                structlog.dev.ConsoleRenderer(colors=False)
                if debug
                else structlog.processors.JSONRenderer()
            ),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        # Settings from a config file reconfigure logging after modules have logged
        cache_logger_on_first_use=False,
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="langcheck",
        description="Check that all JSON language files in a directory declare the same keys",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"Default directory: {DEFAULT_LANG_DIR}",
    )

    parser.add_argument("--version", action="version", version=f"langcheck {__version__}")

    parser.add_argument("lang_dir", nargs="?", type=Path, help="Directory containing language files")

    parser.add_argument("--config-file", type=Path, help="Path to YAML configuration file")

    parser.add_argument("--extension", help="Language file extension (default: .json)")

    parser.add_argument(
        "--reference", help="Reference file name or language code (default: first file by name)"
    )

    # store_true flags default to None so config file values are not overridden
    parser.add_argument(
        "--allow-empty", action="store_true", default=None,
        help="Succeed when no language files are found",
    )
    parser.add_argument(
        "--collect-errors", action="store_true", default=None,
        help="Report every unreadable file instead of stopping at the first",
    )
    parser.add_argument("--verbose", action="store_true", default=None, help="Enable info logging")
    parser.add_argument("--debug", action="store_true", default=None, help="Enable debug logging")

    return parser.parse_args(argv)


def _print_mismatches(result: CheckResult, message: str) -> None:
    print(message, file=sys.stderr)
    print(f"Reference: {result.reference}", file=sys.stderr)
    for file_report in result.mismatched:
        print(f"  {file_report.describe()}", file=sys.stderr)


def report(result: CheckResult) -> int:
    """Print the outcome of a check and return the exit code."""
    for error in result.load_errors:
        print(f"Error: {error.message}", file=sys.stderr)

    try:
        result.raise_for_status()
    except InconsistentKeysError as e:
        _print_mismatches(result, e.user_message)
        return 1
    except LangCheckError as e:
        # Load failures take precedence; mismatches among loaded files still get listed
        if result.mismatched:
            _print_mismatches(result, INCONSISTENT_MESSAGE)
        print(f"Error: {e.user_message}", file=sys.stderr)
        return 1

    print(SUCCESS_MESSAGE)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Run a check and return the process exit code."""
    args = parse_args(argv)

    setup_logging(debug=bool(args.debug), verbose=bool(args.verbose))
    logger = structlog.get_logger()

    try:
        settings: CheckerSettings = load_config(
            config_file=args.config_file,
            lang_dir=args.lang_dir,
            extension=args.extension,
            reference=args.reference,
            allow_empty=args.allow_empty,
            collect_errors=args.collect_errors,
            debug=args.debug,
            verbose=args.verbose,
        )
        if settings.debug != bool(args.debug) or settings.verbose != bool(args.verbose):
            setup_logging(debug=settings.debug, verbose=settings.verbose)

        logger.info("Checking translation files", version=__version__, dir=str(settings.lang_dir))
        result = ConsistencyChecker(settings).run()

    except LangCheckError as e:
        print(f"Error: {e.user_message}", file=sys.stderr)
        return 1
    except Exception as e:
        logger.exception("Unexpected error", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return report(result)


def run() -> None:
    """Synchronous entry point for setuptools."""
    sys.exit(main())


if __name__ == "__main__":
    run()
