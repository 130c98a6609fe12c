"""Hardcoded listings for local development when no exports are available."""

from typing import List

from listings.models import AddressComponent, BusinessListing, LatLng, LocalizedText


def _component(long_text: str, short_text: str, kind: str) -> AddressComponent:
    return AddressComponent(long_text=long_text, short_text=short_text, types=(kind,))


def _brixham_listing(
    *,
    listing_id: str,
    name: str,
    address: str,
    components: List[AddressComponent],
    latitude: float,
    longitude: float,
    rating: float,
    review_count: int,
    website_uri: str,
    price_level: str,
    primary_type: str,
    phone: str,
    subcategory: str,
    postcode: str,
) -> BusinessListing:
    return BusinessListing(
        id=listing_id,
        name=LocalizedText(text=name),
        formatted_address=address,
        address_components=tuple(components),
        location=LatLng(latitude=latitude, longitude=longitude),
        rating=rating,
        review_count=review_count,
        website_uri=website_uri,
        business_status="OPERATIONAL",
        price_level=price_level,
        primary_type_display_name=LocalizedText(text=primary_type),
        national_phone_number=phone,
        category="fish-and-chips",
        subcategory=subcategory,
        verified=True,
        town="Brixham",
        county="Devon",
        postcode=postcode,
    )


def get_sample_listings() -> List[BusinessListing]:
    """Return five Brixham listings; a new list is built on every call."""
    return [
        _brixham_listing(
            listing_id="brixham-fish-restaurant",
            name="Brixham Fish Restaurant & Takeaway",
            address="22 The Quay, Brixham TQ5 8AW, UK",
            components=[
                _component("22", "22", "street_number"),
                _component("The Quay", "The Quay", "route"),
                _component("Brixham", "Brixham", "postal_town"),
                _component("TQ5 8AW", "TQ5 8AW", "postal_code"),
            ],
            latitude=50.3973947,
            longitude=-3.5128581,
            rating=4.6,
            review_count=484,
            website_uri="http://brixhamfishrestaurant.com/",
            price_level="PRICE_LEVEL_INEXPENSIVE",
            primary_type="Restaurant",
            phone="01803 123456",
            subcategory="restaurant",
            postcode="TQ5 8AW",
        ),
        _brixham_listing(
            listing_id="simply-fish-brixham",
            name="Simply Fish",
            address="68-74 Fore St, Brixham TQ5 8AF, UK",
            components=[
                _component("68-74", "68-74", "street_number"),
                _component("Fore Street", "Fore St", "route"),
                _component("Brixham", "Brixham", "postal_town"),
                _component("TQ5 8AF", "TQ5 8AF", "postal_code"),
            ],
            latitude=50.395843899999996,
            longitude=-3.5126364,
            rating=4.3,
            review_count=1200,
            website_uri="http://simplyfishrestaurant.co.uk/",
            price_level="PRICE_LEVEL_MODERATE",
            primary_type="Seafood Restaurant",
            phone="01803 859585",
            subcategory="seafood-restaurant",
            postcode="TQ5 8AF",
        ),
        _brixham_listing(
            listing_id="rockfish-brixham",
            name="Rockfish",
            address="New Fish Quay, Brixham TQ5 8AW, UK",
            components=[
                _component("New Fish Quay", "New Fish Quay", "premise"),
                _component("Brixham", "Brixham", "postal_town"),
                _component("TQ5 8AW", "TQ5 8AW", "postal_code"),
            ],
            latitude=50.397940999999996,
            longitude=-3.512194,
            rating=4.5,
            review_count=2688,
            website_uri="https://therockfish.co.uk/pages/brixham-seafood-restaurant",
            price_level="PRICE_LEVEL_MODERATE",
            primary_type="Seafood Restaurant",
            phone="01803 850872",
            subcategory="seafood-restaurant",
            postcode="TQ5 8AW",
        ),
        _brixham_listing(
            listing_id="fishionados-brixham",
            name="Fishionados",
            address="10 Summercourt Way, Brixham TQ5 0DY, UK",
            components=[
                _component("10", "10", "street_number"),
                _component("Summercourt Way", "Summercourt Way", "route"),
                _component("Brixham", "Brixham", "postal_town"),
                _component("TQ5 0DY", "TQ5 0DY", "postal_code"),
            ],
            latitude=50.385506199999995,
            longitude=-3.5301746,
            rating=4.4,
            review_count=217,
            website_uri="https://www.fishionados.co.uk/",
            price_level="PRICE_LEVEL_INEXPENSIVE",
            primary_type="Takeout Restaurant",
            phone="01803 340908",
            subcategory="takeaway",
            postcode="TQ5 0DY",
        ),
        _brixham_listing(
            listing_id="davids-fish-chips",
            name="David's Fish & Chips",
            address="64 Bolton St, Brixham TQ5 9DH, UK",
            components=[
                _component("64", "64", "street_number"),
                _component("Bolton Street", "Bolton St", "route"),
                _component("Brixham", "Brixham", "postal_town"),
                _component("TQ5 9DH", "TQ5 9DH", "postal_code"),
            ],
            latitude=50.3917463,
            longitude=-3.5145964,
            rating=4.5,
            review_count=552,
            website_uri="http://www.davids-chippy.co.uk/",
            price_level="PRICE_LEVEL_MODERATE",
            primary_type="Takeout Restaurant",
            phone="01803 855771",
            subcategory="takeaway",
            postcode="TQ5 9DH",
        ),
    ]
