"""
Command-line interface for deck numbering.

Usage:
    card-autonumber run [--config <yaml>] [--file <path|stdin>] [--check]
"""

import argparse
import sys

from card_autonumber.core.config import load_config
from card_autonumber.core.errors import AutoNumberError
from card_autonumber.numbering import AutoNumberPipeline
from card_autonumber.observability.logger import configure_logging, get_logger
from card_autonumber.observability.messages import LoggingMessageSink
from card_autonumber.parsing import read_source


logger = get_logger(__name__)


def run_command(args) -> int:
    """
    Execute the numbering command.

    Args:
        args: Command-line arguments

    Returns:
        Process exit status
    """
    configure_logging()
    try:
        config = load_config(args.config, file_override=args.file)
        configure_logging(config.log_level, config.log_format)
        source = config.require_source()
        text = read_source(source)
    except AutoNumberError as e:
        logger.error(f"{e}")
        return 1

    sink = LoggingMessageSink()
    pipeline = AutoNumberPipeline(sink=sink)
    result = pipeline.process(text, source=source)

    if sink.error_count:
        logger.warning(f"{sink.error_count} card(s) skipped because they could not be parsed")

    if args.check:
        for assignment in result.assignments:
            logger.warning(
                f"Card at offset {assignment.offset} needs an id "
                f"(would be {assignment.new_identifier})"
            )
        return 1 if result.changed else 0

    sys.stdout.write(result.text)
    sys.stdout.flush()
    return 0


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="card-autonumber",
        description="Assign chronological ids to cards in a Typst deck",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Number the deck configured in autonumber.yaml, print the result
  card-autonumber run

  # Number a specific file
  card-autonumber run --file decks/biology.typ > decks/biology.numbered.typ

  # Use as a formatter reading standard input
  cat deck.typ | card-autonumber run --file stdin

  # Fail if any card still needs an id
  card-autonumber run --check
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    run_parser = subparsers.add_parser("run", help="Number a deck and print it")
    run_parser.add_argument(
        "--config",
        default=None,
        help="Path to YAML config (default: $AUTONUMBER_CONFIG or autonumber.yaml)"
    )
    run_parser.add_argument(
        "--file",
        default=None,
        help="Deck file to number, or 'stdin' (overrides config)"
    )
    run_parser.add_argument(
        "--check",
        action="store_true",
        help="Print nothing; exit 1 if any card would be numbered"
    )

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help(sys.stderr)
        return 1

    if args.command == "run":
        return run_command(args)

    return 1


if __name__ == "__main__":
    sys.exit(main())
