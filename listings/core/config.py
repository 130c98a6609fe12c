"""Application configuration helpers."""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Tuple

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DISCOVER_FILES = "*"

DEFAULT_LISTING_FILES: Tuple[str, ...] = (
    "20250420_2311_Fish_and_Chip_shops_in_Brixham,_Devon.json",
    "20250420_2311_Fish_and_Chip_shops_in_Budleigh_Salterton,_Devon.json",
)


@dataclass(frozen=True)
class Settings:
    data_dir: str
    output_path: str
    # None means "scan data_dir for *.json".
    listing_files: Optional[Tuple[str, ...]] = DEFAULT_LISTING_FILES
    use_sample: bool = False


def _parse_listing_files(raw: Optional[str]) -> Optional[Tuple[str, ...]]:
    if raw is None or not raw.strip():
        return DEFAULT_LISTING_FILES
    if raw.strip() == DISCOVER_FILES:
        return None
    return tuple(name.strip() for name in raw.split(",") if name.strip())


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from environment variables with sensible defaults."""
    load_dotenv()

    cwd = os.getcwd()
    data_dir = os.getenv("LISTINGS_DATA_DIR") or os.path.join(cwd, "data", "listings")
    output_path = os.getenv("LISTINGS_OUTPUT_PATH") or os.path.join(cwd, "public", "listings.json")
    listing_files = _parse_listing_files(os.getenv("LISTINGS_FILES"))
    use_sample = os.getenv("LISTINGS_USE_SAMPLE", "false").lower() in {"1", "true", "yes"}

    if not os.path.isdir(data_dir):
        logger.warning("Listings data directory %s does not exist; no listings will be loaded.", data_dir)

    return Settings(
        data_dir=data_dir,
        output_path=output_path,
        listing_files=listing_files,
        use_sample=use_sample,
    )
