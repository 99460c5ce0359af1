"""Normalization of raw Hostaway review objects into canonical records.

The upstream payload is loosely typed: any field may be missing, the overall
rating is often null, and category scores use a 10-point scale. Everything
here is pure; persistence happens in the ingestion handler.
"""

from collections.abc import Mapping
from datetime import UTC, date, datetime, time

from protean.exceptions import ValidationError

from guest_reviews.review.review import ReviewType
from guest_reviews.shared.category_rating import CategoryRating
from guest_reviews.shared.scales import mean, round_rating, to_display_scale
from guest_reviews.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_REVIEW_TYPE = ReviewType.GUEST_TO_HOST.value
DEFAULT_CHANNEL = "hostaway"
DEFAULT_UPSTREAM_STATUS = "published"
ANONYMOUS_GUEST = "Anonymous Guest"
UNKNOWN_PROPERTY = "Unknown Property"


def parse_timestamp(value) -> datetime | None:
    """Parse an upstream timestamp into an aware UTC datetime.

    Accepts datetimes, dates and ISO-8601 strings (Hostaway sends
    ``2020-08-21 22:45:14``). Naive values are taken to be UTC. Returns None
    when the value cannot be read.
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    elif isinstance(value, str) and value.strip():
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


def _is_number(value) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def normalize_categories(raw_categories) -> list[dict]:
    if raw_categories is None:
        return []
    if not isinstance(raw_categories, list):
        raise ValidationError({"reviewCategory": ["Review categories must be a list"]})

    categories = []
    for entry in raw_categories:
        if not isinstance(entry, Mapping):
            raise ValidationError({"reviewCategory": ["Each review category must be an object"]})

        rating = entry.get("rating")
        if not _is_number(rating) or int(rating) != rating:
            raise ValidationError({"reviewCategory": [f"Category rating must be a whole number, got {rating!r}"]})

        category = CategoryRating(category=entry.get("category"), rating=int(rating))
        categories.append(category.as_dict())

    return categories


def derive_rating(categories: list[dict]) -> float:
    """Overall 5-point rating from 10-point category scores, 0 without categories."""
    if not categories:
        return 0.0
    return round_rating(to_display_scale(mean(c["rating"] for c in categories)))


def normalize_review(raw, received_at: datetime) -> dict:
    """Map one raw upstream review onto the Review aggregate's fields.

    Raises ``ValidationError`` when the item has no id or carries values of
    the wrong shape; callers skip such items and keep going.
    """
    if not isinstance(raw, Mapping):
        raise ValidationError({"review": ["Review entry must be an object"]})

    raw_id = raw.get("id")
    if raw_id is None or str(raw_id).strip() == "":
        raise ValidationError({"id": ["Review id is required"]})
    review_id = str(raw_id).strip()

    categories = normalize_categories(raw.get("reviewCategory"))

    raw_rating = raw.get("rating")
    if raw_rating is None:
        rating = derive_rating(categories)
    elif _is_number(raw_rating):
        rating = float(raw_rating)
    else:
        raise ValidationError({"rating": [f"Rating must be numeric, got {raw_rating!r}"]})

    submitted_at = parse_timestamp(raw.get("submittedAt"))
    defaulted = submitted_at is None
    if defaulted:
        submitted_at = received_at
        logger.warning(
            "submitted_at_defaulted",
            review_id=review_id,
            raw_value=raw.get("submittedAt"),
            defaulted_to=received_at.isoformat(),
        )

    # listingMapId is Hostaway's own listing number, not a property id
    listing_id = raw.get("listingId")

    return {
        "review_id": review_id,
        "review_type": raw.get("type") or DEFAULT_REVIEW_TYPE,
        "channel": raw.get("channel") or DEFAULT_CHANNEL,
        "rating": rating,
        "public_review": raw.get("publicReview") or "",
        "review_categories": categories,
        "submitted_at": submitted_at,
        "submitted_at_defaulted": defaulted,
        "guest_name": raw.get("guestName") or ANONYMOUS_GUEST,
        "listing_name": raw.get("listingName") or UNKNOWN_PROPERTY,
        "listing_id": str(listing_id) if listing_id else None,
        "upstream_status": raw.get("status") or DEFAULT_UPSTREAM_STATUS,
    }
