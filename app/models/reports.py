"""Response models for dashboard / report endpoints."""

from app.models.candidate import CamelModel


class LabelCount(CamelModel):
    """A label (platform, region, topic, bucket) with its candidate count."""
    name: str
    count: int


class ReportSummary(CamelModel):
    """Full response for GET /api/reports/summary."""
    total: int = 0
    favorites: int = 0
    recommended: int = 0
    platforms: list[LabelCount] = []
    regions: list[LabelCount] = []
    follower_ranges: list[LabelCount] = []
    top_topics: list[LabelCount] = []
    top_platforms: list[LabelCount] = []
