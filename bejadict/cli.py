"""Command-line interface for the dictionary search."""

import argparse
import logging
import sys
from pathlib import Path

from .config import Config
from .data.output_writer import OutputWriter
from .models import SearchDirection, arabic_text, primary_text, secondary_text
from .pipeline import DictionarySearch


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Look up words in the Beja / English dictionaries",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Using a config file
  python -m bejadict.cli --config config.yaml giraat

  # Direct arguments, English search
  python -m bejadict.cli \\
      --dictionary data/dictionary.json \\
      --reverse data/english_beja.json \\
      --secondary data/dict2.json \\
      --direction english "to run"

  # Export results
  python -m bejadict.cli --config config.yaml --output out/giraat.csv --format csv giraat
        """,
    )

    parser.add_argument("query", help="Word or phrase to look up")

    # Config file option
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to YAML configuration file",
    )

    # Datasets
    parser.add_argument("--dictionary", type=Path, help="Path to dictionary.json")
    parser.add_argument("--reverse", type=Path, help="Path to english_beja.json")
    parser.add_argument("--secondary", type=Path, help="Path to dict2.json")

    # Search options
    parser.add_argument(
        "--direction",
        choices=[d.value for d in SearchDirection],
        default=SearchDirection.TARGET_LANGUAGE.value,
        help="Language of the query (default: beja)",
    )
    parser.add_argument(
        "--limit",
        type=int,
        help="Maximum number of results to print",
    )

    # Output
    parser.add_argument(
        "--output",
        type=Path,
        help="Also write results to this file",
    )
    parser.add_argument(
        "--format",
        choices=["csv", "parquet", "json"],
        help="Output format (default: json)",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> Config:
    """Build configuration from arguments."""
    config = Config.from_yaml(args.config) if args.config else Config()

    # Override with command-line arguments
    if args.dictionary:
        config.data.dictionary_path = args.dictionary
    if args.reverse:
        config.data.reverse_path = args.reverse
    if args.secondary:
        config.data.secondary_path = args.secondary

    if not any((config.data.dictionary_path, config.data.reverse_path, config.data.secondary_path)):
        raise ValueError(
            "Either --config or at least one of --dictionary, --reverse, --secondary is required"
        )

    if args.output:
        config.output.output_path = args.output
    if args.format:
        config.output.format = args.format

    return config


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = build_config(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    direction = SearchDirection(args.direction)

    try:
        service = DictionarySearch(config)
        results = service.lookup(args.query, direction)
    except FileNotFoundError as e:
        print(f"Error: File not found - {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    shown = results[:args.limit] if args.limit else results
    if not shown:
        print("No results found.")

    for i, result in enumerate(shown, start=1):
        line = f"{i:>3}. {primary_text(result, direction)}  [{result.kind.value}, p. {result.source.page}]"
        print(line)
        translation = secondary_text(result, direction)
        arabic = arabic_text(result)
        if arabic:
            translation = f"{translation} / {arabic}" if translation else arabic
        if translation:
            print(f"     {translation}")

    if config.output.output_path:
        with OutputWriter(config.output.output_path, format=config.output.format) as writer:
            writer.write_results(shown)
        print(f"\nResults saved to: {config.output.output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
