"""ApproveReview / RejectReview — managers decide what the listing page shows.

Both handlers return the updated review in its canonical form so callers can
render the new state without reading it back. An unknown review id surfaces
as ``ObjectNotFoundError`` from the repository.
"""

from protean.fields import Identifier, String
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from guest_reviews.domain import guest_reviews
from guest_reviews.review.review import Review
from guest_reviews.utils.logging import get_logger

logger = get_logger(__name__)


@guest_reviews.command(part_of="Review")
class ApproveReview:
    review_id = Identifier(required=True)
    approved_by = String(max_length=255)  # Defaults to the configured moderator


@guest_reviews.command(part_of="Review")
class RejectReview:
    review_id = Identifier(required=True)
    rejected_by = String(max_length=255)  # Defaults to the configured moderator


@guest_reviews.command_handler(part_of=Review)
class ModerateReviewHandler:
    @handle(ApproveReview)
    def approve_review(self, command):
        repo = current_domain.repository_for(Review)
        review = repo.get(command.review_id)

        review.approve(moderator=command.approved_by)
        repo.add(review)

        logger.info("review_approved", review_id=str(review.id), moderator=review.moderated_by)
        return review.as_canonical()

    @handle(RejectReview)
    def reject_review(self, command):
        repo = current_domain.repository_for(Review)
        review = repo.get(command.review_id)

        review.reject(moderator=command.rejected_by)
        repo.add(review)

        logger.info("review_rejected", review_id=str(review.id), moderator=review.moderated_by)
        return review.as_canonical()
