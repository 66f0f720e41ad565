#!/usr/bin/env python3
"""
Main entry point for the Homophone Scraper.
Builds homophone pair and single-word lists from plain text word lists.
"""

import logging
import sys
import argparse
from pathlib import Path

from homophone_scraper import __version__
from homophone_scraper.config_manager import ConfigManager, RunConfig
from homophone_scraper.exceptions import ConfigurationError, HomophoneScraperError
from homophone_scraper.orchestrator import Orchestrator


def setup_logging(log_level: str = "INFO", log_file: str = None):
    """Configure logging to stderr and, optionally, a log file."""
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=log_format,
        datefmt=date_format,
        handlers=handlers,
        force=True
    )

    # Suppress overly verbose external library logs
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("requests").setLevel(logging.WARNING)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Homophone Scraper - build homophone lists from Wiktionary"
    )
    parser.add_argument(
        "inputs",
        nargs="+",
        type=Path,
        help="Word list files, one word per line"
    )
    parser.add_argument(
        "--pairs", "-p",
        type=Path,
        help="Write word,homophone pairs to this file"
    )
    parser.add_argument(
        "--singles", "-s",
        type=Path,
        help="Write the distinct words of all pairs to this file"
    )
    parser.add_argument(
        "--force", "-f",
        action="store_true",
        help="Overwrite existing output files"
    )
    parser.add_argument(
        "--config", "-c",
        help="Optional YAML file with fetch settings"
    )
    parser.add_argument(
        "--log-level", "-l",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)"
    )
    parser.add_argument(
        "--log-file",
        help="Also write logs to this file"
    )
    return parser


def main(argv=None):
    """Main execution function."""
    args = build_parser().parse_args(argv)

    try:
        setup_logging(args.log_level, args.log_file)
    except OSError as e:
        print(f"Cannot open log file {args.log_file}: {e}", file=sys.stderr)
        return 1
    logger = logging.getLogger(__name__)

    run_config = RunConfig(
        inputs=args.inputs,
        pairs_path=args.pairs,
        singles_path=args.singles,
        force=args.force,
    )

    orchestrator = None
    try:
        fetch_settings = ConfigManager(args.config).get_fetch_settings()

        logger.info(f"Homophone Scraper v{__version__}")
        orchestrator = Orchestrator(run_config, fetch_settings)
        results = orchestrator.run()

        print("\n" + "=" * 60)
        print("HOMOPHONE SCRAPE COMPLETE")
        print("=" * 60)
        print(f"Duration: {results['duration_seconds']:.1f} seconds")
        print(f"Words Looked Up: {results['words_loaded']:,}")
        print(f"Words With Homophones: {results['words_with_homophones']:,}")
        print(f"Pairs: {results['pairs']:,}")
        print(f"Singles: {results['singles']:,}")
        for name, path in results['outputs'].items():
            print(f"Wrote {name}: {path}")
        print("=" * 60)

        return 0

    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return 1

    except HomophoneScraperError as e:
        logger.error(f"Fatal error: {e}")
        return 1

    except KeyboardInterrupt:
        logger.info("Scrape interrupted by user")
        return 130

    finally:
        if orchestrator is not None:
            orchestrator.cleanup()


if __name__ == "__main__":
    sys.exit(main())
