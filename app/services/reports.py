"""Dashboard / report aggregation and CSV export.

Aggregates are computed in Python over the full candidate collection.
Follower buckets come from ``query_engine`` so report counts line up with
what the ``followerRange`` filter returns.
"""

from __future__ import annotations

import csv
import io
import logging
from collections import Counter
from collections.abc import Iterable

from app.core.constants import CSV_HEADER, TOP_PLATFORMS_LIMIT, TOP_TOPICS_LIMIT
from app.models.candidate import Candidate
from app.models.enums import FollowerRange
from app.models.reports import LabelCount, ReportSummary
from app.services.query_engine import follower_range_of

logger = logging.getLogger(__name__)


def _ranked(counter: Counter, limit: int | None = None) -> list[LabelCount]:
    # Counter.most_common keeps first-seen order for equal counts
    return [
        LabelCount(name=str(name), count=count)
        for name, count in counter.most_common(limit)
    ]


def build_summary(candidates: Iterable[Candidate]) -> ReportSummary:
    """Aggregate totals and distributions for the dashboard."""
    rows = list(candidates)

    platforms: Counter = Counter(c.platform.value for c in rows)
    regions: Counter = Counter(c.region.value for c in rows)
    topics: Counter = Counter(t.value for c in rows for t in c.topics)

    buckets: dict[FollowerRange, int] = {r: 0 for r in FollowerRange}
    for candidate in rows:
        bucket = follower_range_of(candidate.follower_count)
        if bucket is not None:
            buckets[bucket] += 1

    return ReportSummary(
        total=len(rows),
        favorites=sum(1 for c in rows if c.is_favorite),
        recommended=sum(1 for c in rows if c.is_recommended),
        platforms=_ranked(platforms),
        regions=_ranked(regions),
        follower_ranges=[
            LabelCount(name=bucket.value, count=count)
            for bucket, count in buckets.items()
        ],
        top_topics=_ranked(topics, TOP_TOPICS_LIMIT),
        top_platforms=_ranked(platforms, TOP_PLATFORMS_LIMIT),
    )


def _flag(value: bool) -> str:
    return "true" if value else "false"


def export_csv(candidates: Iterable[Candidate]) -> str:
    """Render *candidates* as CSV text with a header row."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    count = 0
    for candidate in candidates:
        writer.writerow([
            candidate.name,
            candidate.social_handle,
            candidate.platform.value,
            candidate.follower_count,
            candidate.region.value,
            ";".join(t.value for t in candidate.topics),
            candidate.description,
            _flag(candidate.is_recommended),
            _flag(candidate.is_favorite),
        ])
        count += 1
    logger.info("candidates_exported", extra={"rows": count})
    return buffer.getvalue()
