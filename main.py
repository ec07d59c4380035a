#!/usr/bin/env python3
"""Pet Health: classify every pet in a catalog file.

Loads the pet catalog, computes each pet's health status with the
per-species strategies and prints the results.

Usage:
    python main.py
    python main.py --catalog data/pets.json
    python main.py --summary
    python main.py --log-level DEBUG
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger("pet-health")

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _configure_logging(level: str) -> None:
    """Configure root logging for the command-line run."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    """Load the catalog, classify every pet and print the results.

    Args:
        argv: Command-line arguments, defaults to ``sys.argv[1:]``.

    Returns:
        Process exit code.
    """
    from src.config import get_config

    config = get_config()

    parser = argparse.ArgumentParser(description="Pet catalog health report")
    parser.add_argument(
        "--catalog",
        type=Path,
        default=None,
        help=f"Catalog file (.json or .csv), default {config.catalog_file}",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Also print status counts per kind",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=config.log_level.upper(),
        help="Logging level",
    )
    args = parser.parse_args(argv)
    # argparse does not check defaults against choices; LOG_LEVEL comes from the environment.
    if args.log_level not in LOG_LEVELS:
        parser.error(f"invalid LOG_LEVEL: {args.log_level!r}")

    _configure_logging(args.log_level)

    from src.data.loader import load_pets
    from src.health.report import classify_pets, health_summary

    catalog = args.catalog or config.catalog_file
    try:
        pets = load_pets(catalog)
    except (FileNotFoundError, ValueError) as exc:
        logger.error("Could not load pet catalog: %s", exc)
        return 1

    results = classify_pets(pets)
    for result in results:
        print(f"{result.pet_id:>4}  {result.name:<16} {result.kind:<6} {result.status.value}")

    if args.summary:
        print()
        print(health_summary(results).to_string())

    return 0


if __name__ == "__main__":
    sys.exit(main())
