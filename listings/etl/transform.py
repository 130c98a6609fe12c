"""Utilities for transforming Google Places exports into BusinessListing objects."""

import logging
import re
from typing import Any, Dict, Iterable, Optional, Tuple

from listings.models import AddressComponent, BusinessListing, LatLng, LocalizedText

logger = logging.getLogger(__name__)

CATEGORY = "fish-and-chips"

_SUBCATEGORIES = {
    "seafood_restaurant": "seafood-restaurant",
    "meal_takeaway": "takeaway",
    "takeout_restaurant": "takeaway",
    "restaurant": "restaurant",
}
_DEFAULT_SUBCATEGORY = "takeaway"

_DROPPED_CHARS = re.compile(r"['’&]")
_NON_ALNUM = re.compile(r"[^a-z0-9]+")


class TransformError(ValueError):
    """Raised when a raw Places record cannot be turned into a listing."""


def slugify(value: str) -> str:
    cleaned = _DROPPED_CHARS.sub("", value.lower())
    return _NON_ALNUM.sub("-", cleaned).strip("-")


def parse_address_components(components: Iterable[Dict[str, Any]]) -> Tuple[AddressComponent, ...]:
    parsed = []
    for component in components or []:
        long_text = component.get("longText") or ""
        parsed.append(
            AddressComponent(
                long_text=long_text,
                short_text=component.get("shortText") or long_text,
                types=tuple(component.get("types") or ()),
            )
        )
    return tuple(parsed)


def parse_town_county_postcode(components: Iterable[AddressComponent]) -> Tuple[str, str, str]:
    town = ""
    locality = ""
    county = ""
    postcode = ""
    for component in components:
        types = set(component.types)
        if "postal_town" in types:
            town = component.long_text
        if "locality" in types:
            locality = component.long_text
        if "administrative_area_level_2" in types:
            county = component.long_text
        if "postal_code" in types:
            postcode = component.long_text
    return town or locality, county, postcode


def _subcategory(primary_type: Optional[str]) -> str:
    if not primary_type:
        return _DEFAULT_SUBCATEGORY
    return _SUBCATEGORIES.get(primary_type, primary_type.replace("_", "-"))


def _listing_id(name: str, town: str, place_id: str) -> str:
    name_slug = slugify(name)
    if not name_slug:
        logger.debug("Name %r has no usable characters; using place id %s", name, place_id)
        return place_id
    town_slug = slugify(town)
    if not town_slug or f"-{town_slug}-" in f"-{name_slug}-":
        return name_slug
    return f"{name_slug}-{town_slug}"


def _text(value: Any) -> str:
    if isinstance(value, dict):
        text = value.get("text")
        if isinstance(text, str):
            return text
    return ""


def transform_business_data(result: Dict[str, Any]) -> BusinessListing:
    """Map one raw record from a Places export onto a BusinessListing.

    Raises TransformError when the record has no place id or display name.
    """
    if not isinstance(result, dict):
        raise TransformError(f"expected a JSON object, got {type(result).__name__}")

    place_id = result.get("id")
    if not place_id:
        raise TransformError("record has no id")
    name = _text(result.get("displayName"))
    if not name:
        raise TransformError(f"record {place_id} has no displayName.text")

    components = parse_address_components(result.get("addressComponents", []))
    town, county, postcode = parse_town_county_postcode(components)
    location = result.get("location") or {}
    business_status = result.get("businessStatus") or "OPERATIONAL"

    try:
        rating = float(result.get("rating") or 0.0)
        review_count = int(result.get("userRatingCount") or 0)
        latitude = float(location.get("latitude") or 0.0)
        longitude = float(location.get("longitude") or 0.0)
    except (AttributeError, TypeError, ValueError) as exc:
        raise TransformError(f"record {place_id} has a non-numeric field: {exc}") from exc

    return BusinessListing(
        id=_listing_id(name, town, place_id),
        name=LocalizedText(text=name),
        formatted_address=result.get("formattedAddress") or "",
        address_components=components,
        location=LatLng(latitude=latitude, longitude=longitude),
        rating=rating,
        review_count=review_count,
        website_uri=result.get("websiteUri") or "",
        business_status=business_status,
        price_level=result.get("priceLevel") or "",
        primary_type_display_name=LocalizedText(text=_text(result.get("primaryTypeDisplayName"))),
        national_phone_number=result.get("nationalPhoneNumber") or "",
        category=CATEGORY,
        subcategory=_subcategory(result.get("primaryType")),
        verified=business_status == "OPERATIONAL",
        town=town,
        county=county,
        postcode=postcode,
    )
