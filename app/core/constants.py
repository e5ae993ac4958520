"""Application constants.

Contains follower bucket boundaries, report sizes and CSV layout.
"""

from app.models.enums import FollowerRange

# ---------------------------------------------------------------------------
# Follower buckets
# Half-open [low, high) intervals; ``None`` means unbounded above.
# ---------------------------------------------------------------------------
FOLLOWER_RANGE_BOUNDS: dict[FollowerRange, tuple[int, int | None]] = {
    FollowerRange.up_to_5k: (0, 5_000),
    FollowerRange.from_5k_to_10k: (5_000, 10_000),
    FollowerRange.from_10k_to_50k: (10_000, 50_000),
    FollowerRange.from_50k_to_100k: (50_000, 100_000),
    FollowerRange.over_100k: (100_000, None),
}

# ---------------------------------------------------------------------------
# Input limits
# ---------------------------------------------------------------------------
MIN_TOPICS: int = 1
MAX_TOPICS: int = 3
MIN_DESCRIPTION_LENGTH: int = 10

# ---------------------------------------------------------------------------
# Reports
# ---------------------------------------------------------------------------
TOP_TOPICS_LIMIT: int = 10
TOP_PLATFORMS_LIMIT: int = 3

# ---------------------------------------------------------------------------
# CSV export
# ---------------------------------------------------------------------------
CSV_EXPORT_FILENAME: str = "podcast-candidates.csv"
CSV_HEADER: list[str] = [
    "Name",
    "Social Handle",
    "Platform",
    "Follower Count",
    "Region",
    "Topics",
    "Description",
    "Is Recommended",
    "Is Favorite",
]
