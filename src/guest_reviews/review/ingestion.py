"""ImportReviews — normalize a batch of raw upstream reviews and store them.

Each item is normalized on its own. Items that cannot be normalized, or that
break a Review invariant, are logged and skipped; the rest of the batch is
still stored. A review id repeated inside one batch keeps its last occurrence.
"""

import json
from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import String, Text
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from guest_reviews.domain import guest_reviews
from guest_reviews.review.normalization import normalize_review
from guest_reviews.review.review import Review
from guest_reviews.utils.logging import get_logger

logger = get_logger(__name__)


class FeedSource(Enum):
    UPSTREAM = "upstream"
    FALLBACK = "fallback"
    SEED = "seed"


@guest_reviews.command(part_of="Review")
class ImportReviews:
    reviews = Text(required=True)  # JSON array of raw upstream review objects
    source = String(choices=FeedSource, default=FeedSource.UPSTREAM.value)
    note = String(max_length=500)


@guest_reviews.command_handler(part_of=Review)
class ImportReviewsHandler:
    @handle(ImportReviews)
    def import_reviews(self, command):
        raw_items = json.loads(command.reviews)
        received_at = datetime.now(UTC)

        records = {}
        skipped = []
        for position, raw in enumerate(raw_items):
            try:
                record = normalize_review(raw, received_at)
            except ValidationError as exc:
                logger.warning("review_skipped", position=position, errors=exc.messages)
                skipped.append({"position": position, "errors": exc.messages})
                continue
            # Later duplicates win and take the later position
            records.pop(record["review_id"], None)
            records[record["review_id"]] = record

        repo = current_domain.repository_for(Review)
        stored = []
        defaulted = []
        for review_id, record in records.items():
            submitted_at_defaulted = record.pop("submitted_at_defaulted")
            try:
                candidate = Review.from_feed(**record, ingested_at=received_at)
            except ValidationError as exc:
                logger.warning("review_skipped", review_id=review_id, errors=exc.messages)
                skipped.append({"review_id": review_id, "errors": exc.messages})
                continue

            stored.append(repo.upsert(candidate))
            if submitted_at_defaulted:
                defaulted.append(review_id)

        logger.info(
            "reviews_imported",
            source=command.source,
            stored=len(stored),
            skipped=len(skipped),
        )

        result = {
            "source": command.source,
            "count": len(stored),
            "skipped": len(skipped),
            "skipped_items": skipped,
            "defaulted_submitted_at": defaulted,
            "reviews": [review.as_canonical() for review in stored],
        }
        if command.note:
            result["note"] = command.note
        return result
