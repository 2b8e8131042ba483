"""Command-line interface for Shall.

Calculates SHA1, SHA256, SHA512 and MD5 digests of a string, a file,
stdin, or every file in a directory.
"""

import argparse
import logging
import sys

import structlog
from pydantic import ValidationError

from shall import __version__
from shall.config import Settings, get_settings
from shall.exceptions import ConfigurationError, ShallError
from shall.hashing import DigestEngine, DirectoryProcessor, InputResolver
from shall.models import (
    Algorithm,
    DirectorySource,
    FileSource,
    HashRequest,
    LiteralSource,
    StdinSource,
)
from shall.report import Reporter


def configure_logging(verbose: bool) -> None:
    """Configure structlog for console output on stderr."""
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.INFO if verbose else logging.WARNING
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str):
    """Get a structured logger."""
    return structlog.get_logger(name)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shall",
        description="Calculate various hashes of a string or file",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    # Algorithms, in canonical output order
    for algorithm in Algorithm:
        parser.add_argument(
            f"--{algorithm.value}",
            action="store_true",
            help=f"Calculate {algorithm.label} hash",
        )

    # Inputs
    parser.add_argument("--file", metavar="FILE", default=None, help="Input file to hash")
    parser.add_argument(
        "--directory",
        metavar="DIR",
        default=None,
        help="Get hashes for all files in a directory (non-recursive)",
    )
    parser.add_argument("--stdin", action="store_true", help="Read input from stdin")
    parser.add_argument(
        "input",
        nargs="?",
        default=None,
        help="The string to hash (ignored if --file, --stdin or --directory is given)",
    )

    # Output
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=None,
        help="Enable verbose output",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=["table", "json"],
        default=None,
        help="Output format (default: table)",
    )

    return parser


def build_request(args: argparse.Namespace, settings: Settings) -> HashRequest:
    """Build the immutable request from parsed arguments.

    When several inputs are given, --directory wins over --file,
    which wins over --stdin, which wins over the literal string.
    """
    if args.directory is not None:
        source = DirectorySource(path=args.directory)
    elif args.file is not None:
        source = FileSource(path=args.file)
    elif args.stdin:
        source = StdinSource()
    elif args.input is not None:
        source = LiteralSource(text=args.input)
    else:
        raise ConfigurationError(
            "No input given: pass a string, --file, --stdin or --directory"
        )

    return HashRequest(
        source=source,
        algorithms=frozenset(a for a in Algorithm if getattr(args, a.value)),
        verbose=settings.verbose if args.verbose is None else args.verbose,
    )


def load_settings() -> Settings:
    """Load settings, turning invalid SHALL_* values into a ConfigurationError."""
    try:
        return get_settings()
    except ValidationError as e:
        raise ConfigurationError(
            "Invalid settings",
            errors=[
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
                for err in e.errors()
            ],
        ) from e


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)
    configure_logging(bool(args.verbose))
    log = get_logger("shall")

    try:
        settings = load_settings()
        request = build_request(args, settings)
        configure_logging(request.verbose)

        reporter = Reporter(
            fmt=args.output_format or settings.output_format,
            label_width=settings.label_width,
            placeholder=settings.subject_placeholder,
        )
        engine = DigestEngine(
            reporter,
            resolver=InputResolver(),
            directory_processor=DirectoryProcessor(
                sort_entries=settings.sort_directory,
                unknown_name=settings.unknown_name,
            ),
        )
        engine.run(request)
        return 0
    except ShallError as e:
        log.error(e.message, **e.context)
        return 1


if __name__ == "__main__":
    sys.exit(main())
