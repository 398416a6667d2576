"""Default vertical catalogue and loader for operator-supplied overrides."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter

from app.verticals.models import Vertical

logger = logging.getLogger(__name__)

_VERTICALS_ADAPTER = TypeAdapter(list[Vertical])

DEFAULT_VERTICALS: list[dict[str, Any]] = [
    {
        "slug": "africa",
        "display_name": "Africa Travel",
        "short_name": "Africa Tours",
        "description": (
            "Discover the wild beauty of Africa with expert travel guides. Plan safaris, "
            "explore national parks and witness incredible wildlife across the continent."
        ),
        "hero": {
            "title": "YOUR AFRICAN ADVENTURE",
            "subtitle": "STARTS HERE",
            "placeholder": "I want to see the Big Five in Kenya for 10 days, budget is $5k...",
        },
        "colors": {
            "primary": "#228B22",
            "secondary": "#CD853F",
            "accent": "#32CD32",
            "text_gradient": "from-[#228B22] to-[#32CD32]",
            "glow_color": "#228B22",
        },
        "features": [
            {
                "icon": "Binoculars",
                "title": "SAFARI EXPERIENCES",
                "description": "Track the Big Five with expertly planned safari itineraries.",
                "color": "from-[#228B22] to-[#32CD32]",
            },
            {
                "icon": "Mountain",
                "title": "NATIONAL PARKS",
                "description": "World-famous parks and reserves with the best viewing times.",
                "color": "from-[#CD853F] to-[#228B22]",
            },
            {
                "icon": "Camera",
                "title": "CULTURAL IMMERSION",
                "description": "Traditional ceremonies and authentic local experiences.",
                "color": "from-[#32CD32] via-[#228B22] to-[#32CD32]",
            },
        ],
        "keywords": ["africa travel", "safari tours", "big five", "kenya safari", "wildlife"],
        "meta": {
            "category": "adventure",
            "focus": ["safaris", "wildlife", "national parks", "cultural tours"],
            "target_audience": "adventure seekers, wildlife enthusiasts, nature lovers",
        },
    },
    {
        "slug": "christian-travel",
        "display_name": "Christian Travel",
        "short_name": "Christian Tours",
        "description": (
            "Plan your spiritual journey with Christian travel guides. Visit holy sites, "
            "historical churches, pilgrimage routes and biblical destinations."
        ),
        "hero": {
            "title": "YOUR SPIRITUAL JOURNEY",
            "subtitle": "AWAITS",
            "placeholder": "I want to visit the Holy Land for 7 days, budget is $3k...",
        },
        "colors": {
            "primary": "#D4AF37",
            "secondary": "#8B4513",
            "accent": "#FFD700",
            "text_gradient": "from-[#D4AF37] to-[#FFD700]",
            "glow_color": "#D4AF37",
        },
        "features": [
            {
                "icon": "Church",
                "title": "SACRED DESTINATIONS",
                "description": "Holy sites, historical churches and pilgrimage routes.",
                "color": "from-[#D4AF37] to-[#FFD700]",
            },
            {
                "icon": "BookOpen",
                "title": "BIBLICAL HISTORY",
                "description": "Destinations rich in biblical history and context.",
                "color": "from-[#8B4513] to-[#D4AF37]",
            },
            {
                "icon": "Heart",
                "title": "FAITH COMMUNITY",
                "description": "Accommodation near religious sites and faith communities.",
                "color": "from-[#FFD700] via-[#D4AF37] to-[#FFD700]",
            },
        ],
        "keywords": ["christian pilgrimage", "holy land tours", "religious travel", "pilgrimage"],
        "meta": {
            "category": "spiritual",
            "focus": ["pilgrimages", "holy sites", "biblical destinations", "church tours"],
            "target_audience": "christian travelers, pilgrims, religious groups",
        },
    },
    {
        "slug": "luxury",
        "display_name": "Luxury Travel",
        "short_name": "Luxury Escapes",
        "description": (
            "Indulge in premium travel experiences with curated luxury escapes, from "
            "5-star resorts to private jets."
        ),
        "hero": {
            "title": "YOUR LUXURY ESCAPE",
            "subtitle": "DESIGNED FOR YOU",
            "placeholder": "I want a luxury trip to the Maldives for 5 days, budget is $10k...",
        },
        "colors": {
            "primary": "#FFD700",
            "secondary": "#000000",
            "accent": "#C0C0C0",
            "text_gradient": "from-[#FFD700] to-[#C0C0C0]",
            "glow_color": "#FFD700",
        },
        "features": [
            {
                "icon": "Sparkles",
                "title": "5-STAR RESORTS",
                "description": "Handpicked resorts and luxury accommodation.",
                "color": "from-[#FFD700] to-[#C0C0C0]",
            },
            {
                "icon": "Plane",
                "title": "PREMIUM TRAVEL",
                "description": "Private jets, first-class flights and VIP experiences.",
                "color": "from-[#000000] to-[#FFD700]",
            },
            {
                "icon": "Crown",
                "title": "EXCLUSIVE ACCESS",
                "description": "Private tours and bespoke experiences.",
                "color": "from-[#FFD700] via-[#C0C0C0] to-[#FFD700]",
            },
        ],
        "keywords": ["luxury travel", "5 star resorts", "private jets", "luxury vacations"],
        "meta": {
            "category": "luxury",
            "focus": ["5-star hotels", "private travel", "exclusive experiences"],
            "target_audience": "luxury travelers, high-net-worth individuals, VIP clients",
        },
    },
    {
        "slug": "budget",
        "display_name": "Budget Travel",
        "short_name": "Budget Adventures",
        "description": (
            "Travel the world without breaking the bank: affordable destinations, "
            "budget-friendly accommodation and money-saving tips."
        ),
        "hero": {
            "title": "TRAVEL MORE",
            "subtitle": "SPEND LESS",
            "placeholder": "I want to visit Southeast Asia for 2 weeks, budget is $1.5k...",
        },
        "colors": {
            "primary": "#4CAF50",
            "secondary": "#2196F3",
            "accent": "#FFC107",
            "text_gradient": "from-[#4CAF50] to-[#2196F3]",
            "glow_color": "#4CAF50",
        },
        "features": [
            {
                "icon": "Wallet",
                "title": "BUDGET-FRIENDLY",
                "description": "Affordable destinations and money-saving strategies.",
                "color": "from-[#4CAF50] to-[#2196F3]",
            },
            {
                "icon": "MapPin",
                "title": "HIDDEN GEMS",
                "description": "Underrated destinations at a fraction of the cost.",
                "color": "from-[#2196F3] to-[#4CAF50]",
            },
            {
                "icon": "PiggyBank",
                "title": "SAVE MORE",
                "description": "Deals, travel rewards and tips to stretch your budget.",
                "color": "from-[#FFC107] via-[#4CAF50] to-[#2196F3]",
            },
        ],
        "keywords": ["budget travel", "cheap travel", "backpacking", "travel deals"],
        "meta": {
            "category": "budget",
            "focus": ["affordable destinations", "budget accommodations", "deals"],
            "target_audience": "budget-conscious travelers, backpackers, students",
        },
    },
    {
        "slug": "usa-tours",
        "display_name": "USA Tours",
        "short_name": "USA Travel",
        "description": (
            "Explore the landscapes and cities of the United States, from national parks "
            "to bustling metropolises."
        ),
        "hero": {
            "title": "DISCOVER AMERICA",
            "subtitle": "YOUR WAY",
            "placeholder": "I want to tour the West Coast for 10 days, budget is $3k...",
        },
        "colors": {
            "primary": "#E63946",
            "secondary": "#457B9D",
            "accent": "#F1FAEE",
            "text_gradient": "from-[#E63946] to-[#457B9D]",
            "glow_color": "#E63946",
        },
        "features": [
            {
                "icon": "Mountain",
                "title": "NATIONAL PARKS",
                "description": "From the Grand Canyon to Yosemite, with itineraries.",
                "color": "from-[#E63946] to-[#457B9D]",
            },
            {
                "icon": "Building",
                "title": "CITY ADVENTURES",
                "description": "Iconic landmarks and hidden gems in American cities.",
                "color": "from-[#457B9D] to-[#E63946]",
            },
            {
                "icon": "Route",
                "title": "ROAD TRIPS",
                "description": "Curated routes, stops and must-see attractions.",
                "color": "from-[#F1FAEE] via-[#E63946] to-[#457B9D]",
            },
        ],
        "keywords": ["usa travel", "national parks usa", "usa road trips", "usa destinations"],
        "meta": {
            "category": "domestic",
            "focus": ["national parks", "city tours", "road trips"],
            "target_audience": "american travelers, international visitors, road trippers",
        },
    },
    {
        "slug": "island-retreats",
        "display_name": "Island Retreats",
        "short_name": "Island Retreats",
        "description": (
            "Unwind in paradise. From the Maldives to the Caribbean, find your perfect "
            "stretch of white sand and clear blue water."
        ),
        "hero": {
            "title": "YOUR ISLAND PARADISE",
            "subtitle": "AWAITS",
            "placeholder": "I want a beach vacation in the Maldives for 7 days, budget is $4k...",
        },
        "colors": {
            "primary": "#00CED1",
            "secondary": "#87CEEB",
            "accent": "#48D1CC",
            "text_gradient": "from-[#00CED1] to-[#87CEEB]",
            "glow_color": "#00CED1",
        },
        "features": [
            {
                "icon": "Umbrella",
                "title": "BEACH PARADISE",
                "description": "Pristine beaches and crystal-clear waters.",
                "color": "from-[#00CED1] to-[#87CEEB]",
            },
            {
                "icon": "Wave",
                "title": "TROPICAL ESCAPES",
                "description": "Overwater bungalows and beachfront resorts.",
                "color": "from-[#87CEEB] to-[#00CED1]",
            },
            {
                "icon": "Sun",
                "title": "RELAXATION & LUXURY",
                "description": "Spa treatments, water sports and island amenities.",
                "color": "from-[#48D1CC] via-[#00CED1] to-[#87CEEB]",
            },
        ],
        "keywords": ["island vacations", "beach resorts", "maldives", "caribbean"],
        "meta": {
            "category": "leisure",
            "focus": ["beach vacations", "tropical destinations", "island resorts"],
            "target_audience": "honeymooners, couples, relaxation seekers, beach lovers",
        },
    },
]


def load_verticals(path: Path | None = None) -> list[Vertical]:
    """Load verticals from a JSON file, or the built-in catalogue when no path is given.

    Raises:
        OSError: If the file cannot be read
        pydantic.ValidationError: If the file content is not a valid vertical list
    """
    if path is None:
        return _VERTICALS_ADAPTER.validate_python(DEFAULT_VERTICALS)
    logger.info("Loading verticals from %s", path)
    return _VERTICALS_ADAPTER.validate_json(path.read_bytes())
