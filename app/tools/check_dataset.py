"""Validate an address dataset and print a summary.

Usage:
    python -m app.tools.check_dataset
    python -m app.tools.check_dataset --path data/addresses.json
    python -m app.tools.check_dataset --top-tags 20
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections import Counter
from pathlib import Path

from app.adapters.memory.address_store import InMemoryAddressStore
from app.config import settings
from app.domain.exceptions import AddressLoadError

logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")
logger = logging.getLogger(__name__)


def summarize(store: InMemoryAddressStore, top_tags: int = 10) -> dict:
    """Counts used by the verification report."""
    tag_counts: Counter[str] = Counter()
    active = 0
    for address in store:
        tag_counts.update(address.tags)
        if address.is_active:
            active += 1
    return {
        "addresses": len(store),
        "active": active,
        "inactive": len(store) - active,
        "distinct_tags": len(tag_counts),
        "top_tags": tag_counts.most_common(top_tags),
    }


def _print_summary(path: Path, summary: dict) -> None:
    print(f"\n{'='*50}")
    print("DATASET VERIFICATION")
    print(f"{'='*50}")
    print(f"File:          {path}")
    print(f"Addresses:     {summary['addresses']}")
    print(f"Active:        {summary['active']}")
    print(f"Inactive:      {summary['inactive']}")
    print(f"Distinct tags: {summary['distinct_tags']}")
    print(f"Top tags:      {summary['top_tags']}")
    print(f"{'='*50}\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Validate a Geo Lookup address dataset")
    parser.add_argument(
        "--path", type=str, default=settings.addresses_path,
        help=f"Dataset JSON file (default: {settings.addresses_path})",
    )
    parser.add_argument(
        "--top-tags", type=int, default=10,
        help="How many of the most common tags to list (default: 10)",
    )
    args = parser.parse_args(argv)

    path = Path(args.path)
    try:
        store = InMemoryAddressStore.from_file(path)
    except AddressLoadError as e:
        logger.error("%s", e)
        return 1

    _print_summary(path, summarize(store, args.top_tags))
    return 0


if __name__ == "__main__":
    sys.exit(main())
