"""Review aggregate — the canonical shape of a guest or host review.

Reviews arrive from the Hostaway feed (or the sample catalogue) already
normalized, and are keyed by the upstream review id so a re-import replaces
the stored review instead of duplicating it. A replaced review is pending
again; only managers move it out of pending.

Moderation is a single tagged status rather than a pair of flags, so a review
can never be approved and rejected at the same time.

State Machine (3 states):
    PENDING → APPROVED | REJECTED
    APPROVED → REJECTED | APPROVED (re-approval refreshes actor and time)
    REJECTED → APPROVED | REJECTED
    any → PENDING when the upstream record is re-ingested
"""

import json
from datetime import UTC, datetime
from enum import Enum

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Identifier, String, Text

from guest_reviews.domain import guest_reviews
from guest_reviews.review.events import ReviewApproved, ReviewIngested, ReviewRejected
from guest_reviews.settings import settings
from guest_reviews.shared.category_rating import CategoryRating
from guest_reviews.shared.scales import DISPLAY_SCALE


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class ReviewType(Enum):
    GUEST_TO_HOST = "guest-to-host"
    HOST_TO_GUEST = "host-to-guest"


class ModerationStatus(Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


# ---------------------------------------------------------------------------
# State Machine
# ---------------------------------------------------------------------------
_VALID_TRANSITIONS = {
    ModerationStatus.PENDING: {ModerationStatus.APPROVED, ModerationStatus.REJECTED},
    ModerationStatus.APPROVED: {ModerationStatus.APPROVED, ModerationStatus.REJECTED},
    ModerationStatus.REJECTED: {ModerationStatus.APPROVED, ModerationStatus.REJECTED},
}

# Fields copied from a re-ingested record. Moderation is reset, not copied.
CONTENT_FIELDS = (
    "review_type",
    "channel",
    "rating",
    "public_review",
    "review_categories",
    "submitted_at",
    "guest_name",
    "listing_name",
    "listing_id",
    "upstream_status",
)


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@guest_reviews.aggregate
class Review:
    """A single review event, identified by its upstream id."""

    # Content
    review_type = String(choices=ReviewType, default=ReviewType.GUEST_TO_HOST.value)
    channel = String(required=True, max_length=100)
    rating = Float(min_value=0.0, max_value=float(DISPLAY_SCALE))
    public_review = Text()
    review_categories = Text()  # JSON: [{category, rating}] on the 10-point scale
    submitted_at = DateTime(required=True)
    guest_name = String(required=True, max_length=255)
    listing_name = String(required=True, max_length=500)
    listing_id = Identifier()
    upstream_status = String(max_length=50, default="published")

    # Moderation
    status = String(choices=ModerationStatus, default=ModerationStatus.PENDING.value)
    moderated_by = String(max_length=255)
    moderated_at = DateTime()

    # Timestamps
    ingested_at = DateTime()

    # -------------------------------------------------------------------
    # Invariants
    # -------------------------------------------------------------------
    @invariant.post
    def category_ratings_must_be_valid(self):
        try:
            entries = json.loads(self.review_categories) if self.review_categories else []
        except (json.JSONDecodeError, TypeError):
            raise ValidationError({"review_categories": ["Review categories must be valid JSON"]})

        if not isinstance(entries, list):
            raise ValidationError({"review_categories": ["Review categories must be a list"]})

        for entry in entries:
            if not isinstance(entry, dict):
                raise ValidationError({"review_categories": ["Each review category must be an object"]})
            CategoryRating(category=entry.get("category"), rating=entry.get("rating"))

    @invariant.post
    def moderation_actor_matches_status(self):
        if self.status == ModerationStatus.PENDING.value:
            if self.moderated_by or self.moderated_at:
                raise ValidationError({"status": ["A pending review cannot carry a moderator"]})
        elif not self.moderated_by or not self.moderated_at:
            raise ValidationError({"status": ["A moderated review must record who moderated it and when"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def from_feed(
        cls,
        review_id,
        channel,
        submitted_at,
        guest_name,
        listing_name,
        rating=None,
        review_type=ReviewType.GUEST_TO_HOST.value,
        public_review="",
        review_categories=None,
        listing_id=None,
        upstream_status="published",
        ingested_at=None,
    ):
        """Build a pending review from a normalized feed record.

        No event is raised here; the repository decides whether the record is
        new or replaces an existing review and records the ingestion then.
        """
        return cls(
            id=review_id,
            review_type=review_type,
            channel=channel,
            rating=rating,
            public_review=public_review,
            review_categories=json.dumps(review_categories or []),
            submitted_at=submitted_at,
            guest_name=guest_name,
            listing_name=listing_name,
            listing_id=listing_id,
            upstream_status=upstream_status,
            status=ModerationStatus.PENDING.value,
            ingested_at=ingested_at or datetime.now(UTC),
        )

    # -------------------------------------------------------------------
    # Ingestion
    # -------------------------------------------------------------------
    def record_ingestion(self, replaced_existing=False):
        self.raise_(
            ReviewIngested(
                review_id=str(self.id),
                channel=self.channel,
                rating=self.rating,
                listing_name=self.listing_name,
                submitted_at=self.submitted_at,
                replaced_existing=replaced_existing,
                ingested_at=self.ingested_at,
            )
        )

    def replace_content(self, incoming):
        """Overwrite the stored review with ``incoming``.

        Fields are replaced, not merged: a value missing from the new record
        falls back to its normalized default rather than the old value.
        Moderation is cleared and the review is pending again.
        """
        with atomic_change(self):
            for field_name in CONTENT_FIELDS:
                setattr(self, field_name, getattr(incoming, field_name))
            self.ingested_at = incoming.ingested_at
            self.status = ModerationStatus.PENDING.value
            self.moderated_by = None
            self.moderated_at = None

        self.record_ingestion(replaced_existing=True)

    # -------------------------------------------------------------------
    # Moderation
    # -------------------------------------------------------------------
    def _assert_can_transition(self, target_status):
        """Validate state machine transition."""
        current = ModerationStatus(self.status)
        if target_status not in _VALID_TRANSITIONS.get(current, set()):
            raise ValidationError({"status": [f"Cannot transition from {current.value} to {target_status.value}"]})

    def approve(self, moderator=None):
        """Approve the review for the public listing page."""
        self._assert_can_transition(ModerationStatus.APPROVED)

        now = datetime.now(UTC)
        moderator = moderator or settings.DEFAULT_MODERATOR

        with atomic_change(self):
            self.status = ModerationStatus.APPROVED.value
            self.moderated_by = moderator
            self.moderated_at = now

        self.raise_(
            ReviewApproved(
                review_id=str(self.id),
                listing_name=self.listing_name,
                rating=self.rating,
                approved_by=moderator,
                approved_at=now,
            )
        )

    def reject(self, moderator=None):
        """Reject the review. Clears any earlier approval."""
        self._assert_can_transition(ModerationStatus.REJECTED)

        now = datetime.now(UTC)
        moderator = moderator or settings.DEFAULT_MODERATOR

        with atomic_change(self):
            self.status = ModerationStatus.REJECTED.value
            self.moderated_by = moderator
            self.moderated_at = now

        self.raise_(
            ReviewRejected(
                review_id=str(self.id),
                listing_name=self.listing_name,
                rating=self.rating,
                rejected_by=moderator,
                rejected_at=now,
            )
        )

    # -------------------------------------------------------------------
    # Read helpers
    # -------------------------------------------------------------------
    @property
    def categories(self) -> list[dict]:
        return json.loads(self.review_categories) if self.review_categories else []

    @property
    def is_approved(self) -> bool:
        return self.status == ModerationStatus.APPROVED.value

    @property
    def is_rejected(self) -> bool:
        return self.status == ModerationStatus.REJECTED.value

    @property
    def is_pending(self) -> bool:
        return self.status == ModerationStatus.PENDING.value

    def as_canonical(self) -> dict:
        """Flat view with the approved/rejected fields dashboards expect."""
        return {
            "id": str(self.id),
            "type": self.review_type,
            "channel": self.channel,
            "rating": self.rating,
            "public_review": self.public_review or "",
            "review_categories": self.categories,
            "submitted_at": self.submitted_at,
            "guest_name": self.guest_name,
            "listing_name": self.listing_name,
            "listing_id": str(self.listing_id) if self.listing_id else None,
            "upstream_status": self.upstream_status,
            "status": self.status,
            "approved": self.is_approved,
            "approved_at": self.moderated_at if self.is_approved else None,
            "approved_by": self.moderated_by if self.is_approved else None,
            "rejected": self.is_rejected,
            "rejected_at": self.moderated_at if self.is_rejected else None,
            "rejected_by": self.moderated_by if self.is_rejected else None,
            "ingested_at": self.ingested_at,
        }
