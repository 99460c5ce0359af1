"""ReviewFilter — the dashboard's review query.

Every field is optional and every supplied field must hold (AND). Inside
``categories`` a review needs only one matching category (OR). Values that
cannot be read raise ``ValidationError`` instead of being ignored, so a typo
in a query never silently widens the result.
"""

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import UTC, date, datetime, time

from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from guest_reviews.review.repository import newest_first
from guest_reviews.review.review import ModerationStatus, Review, ReviewType
from guest_reviews.shared.scales import DISPLAY_SCALE

ALL = "all"
STATUS_CHOICES = (ALL, *(status.value for status in ModerationStatus))

_RATING_SUFFIX = re.compile(r"\s*(\+|stars?)\s*$", re.IGNORECASE)
_DATE_ONLY = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _blank(value) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


def _text(value):
    """Trimmed string, or None for blanks and the ``all`` wildcard."""
    if _blank(value):
        return None
    value = str(value).strip()
    if value.lower() == ALL:
        return None
    return value


def parse_min_rating(value) -> float | None:
    """Read thresholds like ``4``, ``4+`` or ``4 Stars`` as a minimum rating."""
    text = _text(value)
    if text is None:
        return None

    # "4+ Stars" carries both suffixes
    stripped = text
    while True:
        shorter = _RATING_SUFFIX.sub("", stripped)
        if shorter == stripped:
            break
        stripped = shorter

    try:
        threshold = float(stripped)
    except ValueError:
        raise ValidationError({"rating": [f"Invalid rating threshold: {value!r}"]})

    if not 0 <= threshold <= DISPLAY_SCALE:
        raise ValidationError({"rating": [f"Rating threshold must be between 0 and {DISPLAY_SCALE}"]})
    return threshold


def parse_bound(value, field_name: str, end_of_day: bool = False) -> datetime | None:
    """Parse a date or datetime bound. A bare end date covers that whole day."""
    if _blank(value):
        return None

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.max if end_of_day else time.min)
    else:
        text = str(value).strip()
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            raise ValidationError({field_name: [f"Invalid date: {value!r}"]})
        if end_of_day and _DATE_ONLY.match(text):
            parsed = datetime.combine(parsed.date(), time.max)

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


def parse_categories(value) -> frozenset[str] | None:
    if _blank(value):
        return None
    if isinstance(value, str):
        value = value.split(",")
    if not isinstance(value, Iterable):
        raise ValidationError({"categories": [f"Invalid categories: {value!r}"]})

    categories = frozenset(str(item).strip() for item in value if not _blank(item))
    return categories or None


def parse_status(value) -> str | None:
    if _blank(value):
        return None
    status = str(value).strip().lower()
    if status not in STATUS_CHOICES:
        raise ValidationError({"status": [f"Status must be one of {', '.join(STATUS_CHOICES)}"]})
    return None if status == ALL else status


def parse_review_type(value) -> str | None:
    review_type = _text(value)
    if review_type is None:
        return None
    if review_type not in {t.value for t in ReviewType}:
        raise ValidationError({"type": [f"Unknown review type: {value!r}"]})
    return review_type


@dataclass(frozen=True)
class ReviewFilter:
    property: str | None = None
    property_category: str | None = None
    min_rating: float | None = None
    categories: frozenset[str] | None = None
    status: str | None = None
    channel: str | None = None
    review_type: str | None = None
    search: str | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None

    @classmethod
    def from_params(cls, params: Mapping | None = None, **kwargs) -> "ReviewFilter":
        """Build a filter from raw query values (``rating="4+"``, ``status="pending"`` ...)."""
        values = {**(params or {}), **kwargs}

        review_filter = cls(
            property=_text(values.get("property")),
            property_category=_text(values.get("property_category")),
            min_rating=parse_min_rating(values.get("rating")),
            categories=parse_categories(values.get("categories")),
            status=parse_status(values.get("status")),
            channel=_text(values.get("channel")),
            review_type=parse_review_type(values.get("type")),
            search=None if _blank(values.get("search")) else str(values["search"]).strip(),
            start_date=parse_bound(values.get("start_date"), "start_date"),
            end_date=parse_bound(values.get("end_date"), "end_date", end_of_day=True),
        )

        if review_filter.start_date and review_filter.end_date and review_filter.start_date > review_filter.end_date:
            raise ValidationError({"start_date": ["Start date must not be after end date"]})
        return review_filter

    def _category_properties(self):
        from guest_reviews.property.property import Property

        return current_domain.repository_for(Property).find_by_category(self.property_category)

    def matches(self, review, category_properties=None) -> bool:
        if self.property and self.property.lower() not in review.listing_name.lower():
            return False

        if self.property_category is not None:
            if not any(property_.matches(review) for property_ in category_properties or []):
                return False

        if self.min_rating is not None and (review.rating is None or review.rating < self.min_rating):
            return False

        if self.categories and not any(entry["category"] in self.categories for entry in review.categories):
            return False

        if self.status and review.status != self.status:
            return False

        if self.channel and review.channel.lower() != self.channel.lower():
            return False

        if self.review_type and review.review_type != self.review_type:
            return False

        if self.search:
            term = self.search.lower()
            haystack = (review.public_review or "", review.guest_name, review.listing_name, review.channel)
            if not any(term in field.lower() for field in haystack):
                return False

        if self.start_date and review.submitted_at < self.start_date:
            return False
        if self.end_date and review.submitted_at > self.end_date:
            return False

        return True

    def apply(self, reviews) -> list:
        """Matching reviews, newest first regardless of input order."""
        category_properties = self._category_properties() if self.property_category is not None else None
        return newest_first(review for review in reviews if self.matches(review, category_properties))


def query_reviews(params: Mapping | None = None, **kwargs) -> list:
    """Stored reviews matching the given filter values, newest first."""
    review_filter = ReviewFilter.from_params(params, **kwargs)
    return current_domain.repository_for(Review).get_reviews(review_filter)
