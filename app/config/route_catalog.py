"""
Route Catalog Configuration
Template routes used as the narrative basis for generated routes, plus the
preference values accepted from the route form.
"""

from typing import Dict, List


# Preferences offered by the route form (value -> label)
ROUTE_PREFERENCES: Dict[str, str] = {
    "loop": "Loop (Start & End at Same Point)",
    "nature": "Nature & Parks",
    "urban": "Urban Exploration",
    "flat": "Flat Terrain",
    "hills": "Hills & Challenges",
    "scenic": "Scenic Views",
}

# Static template routes. Start and distance are placeholders that every
# generated route overrides with the runner's own values.
TEMPLATE_ROUTES: List[Dict] = [
    {
        "name": "Sunrise Park Loop",
        "start": "Central Park Entrance",
        "summary": (
            "Begin at the Central Park South entrance and follow the main path "
            "counterclockwise. Pass by the picturesque lake, continue through the "
            "tree-lined Mall, and circle back via Bethesda Terrace. This route offers "
            "a perfect balance of shade and sun with minimal elevation changes."
        ),
        "base_distance_km": 5.2,
        "tip": "Morning runs here are magical - try to catch the sunrise for extra inspiration!",
    },
    {
        "name": "Riverside Explorer",
        "start": "Harbor Bridge Lookout",
        "summary": (
            "Start at Harbor Bridge and follow the river path eastward. You'll pass "
            "the Maritime Museum, continue through Riverside Gardens with its beautiful "
            "flower displays, and loop back via the pedestrian boardwalk. The route is "
            "mostly flat with excellent views of the water."
        ),
        "base_distance_km": 8.1,
        "tip": "Bring a water bottle - the drinking fountains along this route are limited!",
    },
    {
        "name": "Hill Conqueror Challenge",
        "start": "Mountain View Park",
        "summary": (
            "Begin at Mountain View Park entrance and take the Summit Trail uphill. "
            "The first 2km are challenging with steep inclines, but you'll be rewarded "
            "with panoramic city views at the top. The return route follows a gentler "
            "gradient through the forest section."
        ),
        "base_distance_km": 6.4,
        "tip": "Take shorter strides on the uphill sections to conserve energy.",
    },
]


def is_valid_preference(value: str) -> bool:
    """Check if a preference value is one the form offers"""
    return value in ROUTE_PREFERENCES
