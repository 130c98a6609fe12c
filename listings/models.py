"""Core data models shared by the listings loader and the build job."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple


@dataclass(frozen=True, slots=True)
class LocalizedText:
    text: str


@dataclass(frozen=True, slots=True)
class AddressComponent:
    long_text: str
    short_text: str
    types: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {"longText": self.long_text, "shortText": self.short_text, "types": list(self.types)}


@dataclass(frozen=True, slots=True)
class LatLng:
    latitude: float
    longitude: float


@dataclass(frozen=True, slots=True)
class BusinessListing:
    """One fish-and-chip shop as rendered by the static site."""

    id: str
    name: LocalizedText
    formatted_address: str
    address_components: Tuple[AddressComponent, ...]
    location: LatLng
    rating: float
    review_count: int
    business_status: str
    price_level: str
    primary_type_display_name: LocalizedText
    national_phone_number: str
    category: str
    subcategory: str
    verified: bool
    town: str
    county: str
    postcode: str
    website_uri: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Serialise to the camelCase JSON shape consumed by the site templates."""
        return {
            "id": self.id,
            "name": {"text": self.name.text},
            "formattedAddress": self.formatted_address,
            "addressComponents": [component.to_dict() for component in self.address_components],
            "location": {"latitude": self.location.latitude, "longitude": self.location.longitude},
            "rating": self.rating,
            "reviewCount": self.review_count,
            "websiteUri": self.website_uri,
            "businessStatus": self.business_status,
            "priceLevel": self.price_level,
            "primaryTypeDisplayName": {"text": self.primary_type_display_name.text},
            "nationalPhoneNumber": self.national_phone_number,
            "category": self.category,
            "subcategory": self.subcategory,
            "verified": self.verified,
            "town": self.town,
            "county": self.county,
            "postcode": self.postcode,
        }
