"""Command-line entrypoint that seeds the food catalog.

Usage:
    calorie-seed                      # production store
    calorie-seed --emulator           # local Firestore emulator / local Supabase
    calorie-seed --file foods.json    # seed from a JSON array instead
"""

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

import pydantic

from calorie_tracker.app_logging import configure_logging
from calorie_tracker.config import Settings
from calorie_tracker.containers import AppContainer, build_container
from calorie_tracker.domain.foods import NutritionRecord
from calorie_tracker.errors import InitializationError
from calorie_tracker.seed_data import SEED_FOODS
from calorie_tracker.seed_models import parse_catalog
from calorie_tracker.services.foods import summarize_results

_logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the seed command argument parser."""
    parser = argparse.ArgumentParser(
        prog="calorie-seed",
        description="Upsert the food reference catalog into the document store.",
    )
    parser.add_argument(
        "--emulator",
        "--local",
        dest="use_local_store",
        action="store_true",
        help="target the local emulator instead of the production store",
    )
    parser.add_argument(
        "--file",
        type=Path,
        help="JSON array of foods to seed instead of the built-in catalog",
    )
    parser.add_argument(
        "--concurrency",
        type=int,
        help="number of writes issued in parallel (default: SEED_CONCURRENCY or 1)",
    )
    parser.add_argument(
        "--store",
        choices=["firestore", "supabase"],
        help="override the configured food store",
    )
    return parser


def load_records(path: Path | None) -> Sequence[NutritionRecord]:
    """Return the records to seed. Raises InitializationError on a bad file."""
    if path is None:
        return SEED_FOODS
    try:
        return parse_catalog(path.read_bytes())
    except (OSError, pydantic.ValidationError) as exc:
        raise InitializationError(f"Cannot load catalog {path}: {exc}") from exc


def main(argv: Sequence[str] | None = None) -> int:
    """Seed the store and return the process exit code."""
    configure_logging()
    args = create_parser().parse_args(argv)
    try:
        records = load_records(args.file)
        settings = Settings()
        if args.store:
            settings = settings.model_copy(update={"food_store": args.store})
        configure_logging(settings.log_level)
        concurrency = (
            settings.seed_concurrency
            if args.concurrency is None
            else args.concurrency
        )
        if concurrency < 1:
            raise InitializationError("concurrency must be at least 1")
        container = build_container(settings, use_local_store=args.use_local_store)
    except (InitializationError, pydantic.ValidationError) as exc:
        _logger.error("Failed to initialize: %s", exc)
        return 1

    try:
        results = container.bulk_upserter.upsert_all(records, concurrency=concurrency)
    except Exception:
        _logger.exception("Seeding aborted")
        return 1
    finally:
        _close(container)

    counts = summarize_results(results)
    _logger.info(
        "Seeding complete: created=%s updated=%s failed=%s",
        counts["created"],
        counts["updated"],
        counts["failed"],
    )
    return 1 if counts["failed"] else 0


def _close(container: AppContainer) -> None:
    asyncio.run(container.close_resources())


def run() -> None:
    """Console script entrypoint."""
    sys.exit(main())


if __name__ == "__main__":
    run()
