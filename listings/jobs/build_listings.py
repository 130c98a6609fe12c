"""CLI job that loads business listings and writes them out for the site build."""

import argparse
import json
import logging
import os
from typing import Any, Dict, Optional, Sequence

from listings.core.config import get_settings
from listings.loaders.static_data import load_business_listings_sync
from listings.models import BusinessListing
from listings.sample import get_sample_listings

logger = logging.getLogger(__name__)


def to_output_payload(listings: Sequence[BusinessListing]) -> Dict[str, Any]:
    return {"count": len(listings), "listings": [listing.to_dict() for listing in listings]}


def write_listings(payload: Dict[str, Any], output_path: str) -> None:
    parent = os.path.dirname(output_path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as fh:
        json.dump(payload, fh, ensure_ascii=False, indent=2)


def run_build_job(*, output_path: str, use_sample: bool, fallback_to_sample: bool) -> int:
    if use_sample:
        logger.info("Using built-in sample listings")
        listings: Sequence[BusinessListing] = get_sample_listings()
    else:
        listings = load_business_listings_sync()
        if not listings and fallback_to_sample:
            logger.warning("No listings loaded from exports; falling back to sample listings.")
            listings = get_sample_listings()

    payload = to_output_payload(listings)
    try:
        write_listings(payload, output_path)
    except OSError as exc:
        logger.error("Failed to write listings to %s: %s", output_path, exc)
        return 1

    logger.info("Wrote %d listings to %s", payload["count"], output_path)
    return 0


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Load business listings and write them as JSON")
    parser.add_argument(
        "--output",
        dest="output_path",
        default=settings.output_path,
        help="Where to write the listings JSON",
    )
    parser.add_argument(
        "--sample",
        dest="use_sample",
        action="store_true",
        default=settings.use_sample,
        help="Write the built-in sample listings instead of reading exports",
    )
    parser.add_argument(
        "--fallback-to-sample",
        dest="fallback_to_sample",
        action="store_true",
        help="Use the sample listings when no exports could be loaded",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s - %(message)s")
    parser = build_parser()
    args = parser.parse_args(argv)

    return run_build_job(
        output_path=args.output_path,
        use_sample=args.use_sample,
        fallback_to_sample=args.fallback_to_sample,
    )


if __name__ == "__main__":
    raise SystemExit(main())
