"""Dashboard and per-property review statistics.

The calculators take plain sequences of reviews and an optional ``now`` so
they can be checked against fixed clocks. The ``*_report`` functions load
what they need from the active domain's repositories.

Ratings are averaged on the 5-point display scale and rounded to one decimal
place. Category averages are computed on the 10-point upstream scale and
converted afterwards.
"""

from collections import Counter, defaultdict
from datetime import UTC, datetime, timedelta

from protean.utils.globals import current_domain

from guest_reviews.analytics.issues import common_issues
from guest_reviews.property.property import Property
from guest_reviews.review.review import Review
from guest_reviews.settings import settings
from guest_reviews.shared.scales import mean, round_rating, to_display_scale

TREND_WEEKS = 5
TREND_WINDOW = timedelta(days=7)
COMPARISON_WINDOW = timedelta(days=30)
UNKNOWN_CHANNEL = "unknown"


def _now(now=None) -> datetime:
    return now or datetime.now(UTC)


def average_rating(reviews) -> float:
    """Mean display rating, 0.0 for no reviews. Missing ratings count as 0."""
    return round_rating(mean(review.rating or 0 for review in reviews))


def category_averages(reviews, categories=None) -> dict[str, float]:
    """Per-category mean for every configured category.

    A category that appears more than once in one review contributes each
    occurrence. Categories outside the registry are ignored.
    """
    categories = categories if categories is not None else settings.REVIEW_CATEGORIES

    totals = defaultdict(int)
    counts = defaultdict(int)
    for review in reviews:
        for entry in review.categories:
            key = entry["category"]
            if key in categories:
                totals[key] += entry["rating"]
                counts[key] += 1

    return {
        key: round_rating(to_display_scale(totals[key] / counts[key])) if counts[key] else 0.0 for key in categories
    }


def rating_trends(reviews, now=None) -> list[dict]:
    """Five consecutive 7-day windows ending at ``now``, oldest first.

    A window covers ``start < submitted_at <= end``.
    """
    now = _now(now)
    reviews = list(reviews)

    buckets = []
    for offset in range(TREND_WEEKS - 1, -1, -1):
        end = now - offset * TREND_WINDOW
        start = end - TREND_WINDOW
        in_window = [review for review in reviews if start < review.submitted_at <= end]
        buckets.append(
            {
                "week": f"Week {TREND_WEEKS - offset}",
                "start": start,
                "end": end,
                "rating": average_rating(in_window),
                "count": len(in_window),
            }
        )
    return buckets


def channel_breakdown(reviews) -> dict[str, int]:
    return dict(Counter(review.channel or UNKNOWN_CHANNEL for review in reviews))


def rating_trend(reviews, now=None) -> float:
    """Mean rating of the last 30 days minus the mean of the 30 days before."""
    now = _now(now)
    recent_start = now - COMPARISON_WINDOW
    previous_start = now - 2 * COMPARISON_WINDOW

    recent = [review.rating or 0 for review in reviews if review.submitted_at >= recent_start]
    previous = [review.rating or 0 for review in reviews if previous_start <= review.submitted_at < recent_start]
    return round_rating(mean(recent) - mean(previous))


def dashboard_metrics(reviews, now=None) -> dict:
    reviews = list(reviews)
    approved = [review for review in reviews if review.is_approved]

    return {
        "total_reviews": len(reviews),
        "approved_reviews": len(approved),
        # Anything not approved is still waiting on the public page
        "pending_reviews": len(reviews) - len(approved),
        "rejected_reviews": sum(1 for review in reviews if review.is_rejected),
        "average_rating": average_rating(reviews),
        "category_averages": category_averages(reviews),
        "trends": rating_trends(reviews, now=now),
    }


def property_metrics(property_, reviews, now=None) -> dict:
    """Statistics for one property over every review linked to it."""
    now = _now(now)
    linked = [review for review in reviews if property_.matches(review)]
    approved = [review for review in linked if review.is_approved]
    recent_start = now - COMPARISON_WINDOW

    return {
        "property": property_.as_dict(),
        "total_reviews": len(linked),
        "approved_reviews": len(approved),
        "pending_reviews": len(linked) - len(approved),
        "average_rating": average_rating(linked),
        "category_averages": category_averages(linked),
        "channel_breakdown": channel_breakdown(linked),
        "trend": rating_trend(linked, now=now),
        "recent_reviews": sum(1 for review in linked if review.submitted_at >= recent_start),
        "common_issues": common_issues(linked),
        "approval_rate": round_rating(len(approved) / len(linked) * 100) if linked else 0.0,
    }


def portfolio_metrics(properties, reviews, now=None) -> list[dict]:
    now = _now(now)
    reviews = list(reviews)
    return [property_metrics(property_, reviews, now=now) for property_ in properties]


# ---------------------------------------------------------------------------
# Repository-backed reports
# ---------------------------------------------------------------------------
def dashboard_report(now=None) -> dict:
    return dashboard_metrics(current_domain.repository_for(Review).get_reviews(), now=now)


def property_report(property_id, now=None) -> dict:
    property_ = current_domain.repository_for(Property).get_property_by_id(property_id)
    return property_metrics(property_, current_domain.repository_for(Review).get_reviews(), now=now)


def portfolio_report(now=None) -> list[dict]:
    properties = current_domain.repository_for(Property).get_properties()
    return portfolio_metrics(properties, current_domain.repository_for(Review).get_reviews(), now=now)
