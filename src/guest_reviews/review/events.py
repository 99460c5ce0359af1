"""Domain events for the Review aggregate.

Events are immutable facts raised on ingestion and on every moderation
transition. They carry enough context for audit logs and downstream
subscribers without a round trip to the repository.
"""

from protean.fields import Boolean, DateTime, Float, Identifier, String

from guest_reviews.domain import guest_reviews


@guest_reviews.event(part_of="Review")
class ReviewIngested:
    """A review was written from the upstream feed or the sample catalogue."""

    __version__ = 1

    review_id = Identifier(required=True)
    channel = String(required=True)
    rating = Float()
    listing_name = String(required=True)
    submitted_at = DateTime(required=True)
    replaced_existing = Boolean(default=False)
    ingested_at = DateTime(required=True)


@guest_reviews.event(part_of="Review")
class ReviewApproved:
    """A manager approved the review for the public listing page."""

    __version__ = 1

    review_id = Identifier(required=True)
    listing_name = String(required=True)
    rating = Float()
    approved_by = String(required=True)
    approved_at = DateTime(required=True)


@guest_reviews.event(part_of="Review")
class ReviewRejected:
    """A manager rejected the review; it is hidden from the listing page."""

    __version__ = 1

    review_id = Identifier(required=True)
    listing_name = String(required=True)
    rating = Float()
    rejected_by = String(required=True)
    rejected_at = DateTime(required=True)
