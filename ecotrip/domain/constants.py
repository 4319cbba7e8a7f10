"""Domain constants shared by deterministic logic."""

EARTH_RADIUS_KM = 6371.0

# One mature tree absorbs roughly this much CO2 per year.
TREE_ABSORPTION_KG_PER_YEAR = 22.0

FLIGHT_SHORT_MAX_KM = 1500.0
FLIGHT_MEDIUM_MAX_KM = 4000.0

SCORE_FLOOR = 20
SCORE_CEILING = 99
SCORE_BASE = 60

BREAKDOWN_COLORS = {
    "transport": "#ef4444",
    "accommodation": "#f59e0b",
    "activity": "#10b981",
}

MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
