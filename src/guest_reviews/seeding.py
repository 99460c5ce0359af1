"""Load the sample property and review catalogue into the active domain.

Seeding can run more than once. Properties already present (by name) and
sample reviews already stored (by id) are left alone, so moderation decisions
made since the last run survive. Re-ingesting a review from the feed is
different: it replaces the review and sends it back to moderation.
"""

from protean.utils.globals import current_domain

from guest_reviews.feed.samples import SAMPLE_PROPERTIES, SAMPLE_REVIEWS
from guest_reviews.property.property import Property
from guest_reviews.property.registration import RegisterProperty
from guest_reviews.review.ingestion import FeedSource
from guest_reviews.review.review import Review
from guest_reviews.review.sync import import_reviews
from guest_reviews.utils.logging import get_logger

logger = get_logger(__name__)


def seed_sample_data() -> dict:
    existing = {property_.name for property_ in current_domain.repository_for(Property).get_properties()}

    registered = 0
    for details in SAMPLE_PROPERTIES:
        if details["name"] in existing:
            continue
        current_domain.process(RegisterProperty(**details), asynchronous=False)
        registered += 1

    stored = {str(review.id) for review in current_domain.repository_for(Review).get_reviews()}
    missing = [raw for raw in SAMPLE_REVIEWS if str(raw["id"]) not in stored]
    result = import_reviews(missing, source=FeedSource.SEED.value)

    logger.info("sample_data_seeded", properties=registered, reviews=result["count"])
    return {"properties": registered, "reviews": result["count"]}
