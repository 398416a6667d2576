"""Default affiliate partner table and loader for operator overrides."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter

from app.affiliates.models import AffiliatePartner

logger = logging.getLogger(__name__)

_PARTNERS_ADAPTER = TypeAdapter(list[AffiliatePartner])

# Replace the tracking values with real affiliate IDs per deployment.
DEFAULT_PARTNERS: list[dict[str, Any]] = [
    {
        "id": "travelpayouts",
        "name": "Travelpayouts",
        "url_template": "https://www.aviasales.com/search?destination={destination}",
        "landing_url": "https://www.aviasales.com",
        "supported_categories": ["flight"],
        "priority": 15,
        "tracking_params": {"marker": "123456"},
    },
    {
        "id": "booking",
        "name": "Booking.com",
        "url_template": "https://www.booking.com/searchresults.html?ss={destination}",
        "landing_url": "https://www.booking.com",
        "supported_categories": ["hotel"],
        "priority": 10,
        "tracking_params": {"aid": "1234567"},
    },
    {
        "id": "getyourguide",
        "name": "GetYourGuide",
        "url_template": "https://www.getyourguide.com/s/?q={destination}",
        "landing_url": "https://www.getyourguide.com",
        "supported_categories": ["tour", "activity"],
        "priority": 9,
        "tracking_params": {"partner_id": "ABCDEF"},
    },
    {
        "id": "viator",
        "name": "Viator",
        "url_template": "https://www.viator.com/searchResults/all?text={destination}",
        "landing_url": "https://www.viator.com",
        "supported_categories": ["tour", "activity"],
        "priority": 8,
        "tracking_params": {"pid": "P123456"},
    },
    {
        "id": "expedia",
        "name": "Expedia",
        "url_template": "https://www.expedia.com/Hotel-Search?destination={destination}",
        "landing_url": "https://www.expedia.com",
        "supported_categories": ["hotel", "flight"],
        "priority": 7,
        "tracking_params": {"rfrr": "123456"},
    },
    {
        "id": "airbnb",
        "name": "Airbnb",
        "url_template": "https://www.airbnb.com/s/{destination}/homes",
        "landing_url": "https://www.airbnb.com",
        "supported_categories": ["hotel"],
        "priority": 6,
        "tracking_params": {"ref_id": "ABC123"},
    },
]


def load_partners(path: Path | None = None) -> list[AffiliatePartner]:
    """Load partners from a JSON file, or the built-in table when no path is given."""
    if path is None:
        return _PARTNERS_ADAPTER.validate_python(DEFAULT_PARTNERS)
    logger.info("Loading affiliate partners from %s", path)
    return _PARTNERS_ADAPTER.validate_json(path.read_bytes())
