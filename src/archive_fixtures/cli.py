"""Command-line interface for archive-fixtures."""

import argparse
import logging
import random
import sys
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from archive_fixtures.config import SynthesisLimits, load_limits
from archive_fixtures.exceptions import FilesystemError, InputError
from archive_fixtures.generator import ArchiveGenerator

COUNT_PROMPT = "Enter number of publications to generate: "
OUTPUT_PROMPT = "Enter path to output directory: "
COMPLETION_MESSAGE = "Done"

T = TypeVar("T")


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def parse_count(text: str) -> int:
    """Parse a publication count.

    Raises:
        InputError: If the text is not an integer or is negative
    """
    try:
        count = int(text.strip())
    except ValueError:
        raise InputError(f"Not a whole number: {text.strip()!r}") from None
    if count < 0:
        raise InputError(f"Enter zero or a positive number, got {count}")
    return count


def parse_output_dir(text: str) -> Path:
    """Parse an output directory path.

    Raises:
        InputError: If the path is empty or not an existing directory
    """
    raw = text.strip()
    if not raw:
        raise InputError("No output directory given")
    path = Path(raw).expanduser()
    if not path.is_dir():
        raise InputError(f"Not an existing directory: {path}")
    return path


def prompt_until_valid(prompt: str, parse: Callable[[str], T]) -> T:
    """Read console input until ``parse`` accepts it.

    Rejected input is logged as a warning and the prompt is repeated.

    Raises:
        EOFError: If console input is exhausted
    """
    logger = logging.getLogger(__name__)
    while True:
        try:
            return parse(input(prompt))
        except InputError as e:
            logger.warning(e.message)


def _argument_type(parse: Callable[[str], T]) -> Callable[[str], T]:
    def convert(text: str) -> T:
        try:
            return parse(text)
        except InputError as e:
            raise argparse.ArgumentTypeError(e.message) from None

    return convert


def generate_fixtures(args: argparse.Namespace) -> int:
    """Execute a generation run.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    limits = SynthesisLimits()
    if args.limits is not None:
        try:
            limits = load_limits(args.limits)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to load limits from {args.limits}: {e}")
            return 1

    try:
        count = args.count
        if count is None:
            count = prompt_until_valid(COUNT_PROMPT, parse_count)
        output_dir = args.output
        if output_dir is None:
            output_dir = prompt_until_valid(OUTPUT_PROMPT, parse_output_dir)
    except EOFError:
        logger.error("No more console input; stopping")
        return 1

    rng = random.Random(args.seed) if args.seed is not None else None
    generator = ArchiveGenerator(output_dir, rng=rng, limits=limits)

    try:
        report = generator.generate(count)
    except FilesystemError as e:
        logger.error(f"Failed to generate publications: {e}")
        return 1

    logger.info(f"Publications written: {report.written} of {report.requested}")
    logger.info(f"  Output: {output_dir}")
    if report.errors:
        logger.warning(f"  Errors: {len(report.errors)}")
        for error in report.errors:
            logger.warning(f"    - {error}")

    print(COMPLETION_MESSAGE)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="archive-fixtures",
        description=(
            "Generate a synthetic digitized-publication archive for testing. "
            "Values not given as options are asked for interactively."
        ),
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--count",
        type=_argument_type(parse_count),
        default=None,
        help="Number of publications to generate",
    )
    parser.add_argument(
        "--output",
        type=_argument_type(parse_output_dir),
        default=None,
        help="Existing directory to write publications into",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for reproducible output (default: unseeded)",
    )
    parser.add_argument(
        "--limits",
        type=Path,
        default=None,
        help="JSON file overriding synthesis limits, e.g. {\"page_count\": [1, 10]}",
    )
    parser.set_defaults(func=generate_fixtures)

    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
