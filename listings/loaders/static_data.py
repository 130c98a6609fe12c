"""Build-time loader for the business listings the static site renders.

Listings are read from JSON exports under the configured data directory,
passed through the transformer one record at a time and cached for the rest
of the process. Bad files and bad records are logged and skipped; the loader
never raises to its caller.
"""

import fnmatch
import json
import logging
import os
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from listings.core.config import get_settings
from listings.etl.transform import transform_business_data
from listings.models import BusinessListing

logger = logging.getLogger(__name__)

Transformer = Callable[[Dict[str, Any]], BusinessListing]

_cache_lock = threading.Lock()
_cached_listings: Optional[Tuple[BusinessListing, ...]] = None


@dataclass(frozen=True)
class LoadDiagnostic:
    source: str
    scope: str  # "record", "file" or "operation"
    message: str


@dataclass(frozen=True)
class LoadReport:
    listings: Tuple[BusinessListing, ...] = ()
    diagnostics: Tuple[LoadDiagnostic, ...] = field(default_factory=tuple)


def discover_listing_files(data_dir: str, pattern: str = "*.json") -> List[str]:
    """Return the names of files in data_dir matching pattern, sorted."""
    try:
        return sorted(
            name
            for name in os.listdir(data_dir)
            if os.path.isfile(os.path.join(data_dir, name)) and fnmatch.fnmatch(name, pattern)
        )
    except FileNotFoundError:
        return []


def _read_json_file(path: str) -> Any:
    with open(path, "r", encoding="utf-8") as fh:
        return json.loads(fh.read())


def load_listings(
    filenames: Iterable[str],
    data_dir: str,
    transformer: Transformer = transform_business_data,
) -> LoadReport:
    """Load and transform every record of every file, skipping what fails.

    Files are processed in the given order and records in file order. A file
    that cannot be read or parsed contributes nothing; a record the
    transformer rejects is dropped on its own. Both are reported as
    diagnostics and logged as warnings.
    """
    listings: List[BusinessListing] = []
    diagnostics: List[LoadDiagnostic] = []

    for filename in filenames:
        try:
            data = _read_json_file(os.path.join(data_dir, filename))
        except Exception as exc:  # noqa: BLE001
            logger.warning("Error loading file %s: %s", filename, exc)
            diagnostics.append(LoadDiagnostic(source=filename, scope="file", message=str(exc)))
            continue

        results = data.get("results") if isinstance(data, dict) else None
        if not isinstance(results, list):
            logger.debug("Skipping %s: no results array", filename)
            continue

        loaded = 0
        for result in results:
            try:
                listings.append(transformer(result))
            except Exception as exc:  # noqa: BLE001
                logger.warning("Error transforming business data from %s: %s", filename, exc)
                diagnostics.append(LoadDiagnostic(source=filename, scope="record", message=str(exc)))
                continue
            loaded += 1
        logger.info("Loaded %d of %d records from %s", loaded, len(results), filename)

    return LoadReport(listings=tuple(listings), diagnostics=tuple(diagnostics))


def _configured_files(data_dir: str) -> List[str]:
    settings = get_settings()
    if settings.listing_files is None:
        return discover_listing_files(data_dir)
    return list(settings.listing_files)


def load_business_listings_sync() -> Tuple[BusinessListing, ...]:
    """Return the site's listings, reading disk only on the first call.

    The result, even an empty one, is cached for the life of the process.
    An unexpected failure is logged and yields an empty tuple without
    touching the cache, so the next call tries again.
    """
    global _cached_listings

    if _cached_listings is not None:
        return _cached_listings

    with _cache_lock:
        if _cached_listings is not None:
            return _cached_listings
        try:
            data_dir = get_settings().data_dir
            report = load_listings(_configured_files(data_dir), data_dir)
        except Exception as exc:  # noqa: BLE001
            logger.error("Error loading business listings: %s", exc, exc_info=True)
            return ()

        _cached_listings = report.listings
        logger.info(
            "Cached %d business listings (%d problems reported)",
            len(report.listings),
            len(report.diagnostics),
        )
        return _cached_listings


def clear_cache() -> None:
    """Forget the cached listings so the next call reloads from disk."""
    global _cached_listings
    with _cache_lock:
        _cached_listings = None
