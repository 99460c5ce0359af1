"""Application tests for the ApproveReview and RejectReview command handlers."""

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError
from guest_reviews.review.moderation import ApproveReview, RejectReview
from guest_reviews.review.review import ModerationStatus, Review
from guest_reviews.review.sync import import_reviews


@pytest.fixture(autouse=True)
def stored_review():
    import_reviews(
        [
            {
                "id": "rev-mod",
                "rating": 4,
                "publicReview": "Nice flat",
                "submittedAt": "2024-02-01T10:00:00Z",
                "guestName": "Anna Martinez",
                "listingName": "Historic Greenwich Townhouse - Victorian Charm",
            }
        ]
    )


def _approve(review_id="rev-mod", approved_by=None):
    return current_domain.process(ApproveReview(review_id=review_id, approved_by=approved_by), asynchronous=False)


def _reject(review_id="rev-mod", rejected_by=None):
    return current_domain.process(RejectReview(review_id=review_id, rejected_by=rejected_by), asynchronous=False)


class TestApproveCommand:
    def test_approve_persists(self):
        _approve(approved_by="alex")

        review = current_domain.repository_for(Review).get("rev-mod")
        assert review.status == ModerationStatus.APPROVED.value
        assert review.moderated_by == "alex"

    def test_approve_returns_canonical_view(self):
        view = _approve(approved_by="alex")

        assert view["id"] == "rev-mod"
        assert view["approved"] is True
        assert view["approved_by"] == "alex"
        assert view["rejected_at"] is None

    def test_approve_defaults_moderator(self):
        assert _approve()["approved_by"] == "manager"

    def test_approve_is_visible_to_next_read(self):
        _approve()
        reviews = current_domain.repository_for(Review).get_reviews()
        assert reviews[0].is_approved

    def test_unknown_review(self):
        with pytest.raises(ObjectNotFoundError):
            _approve(review_id="does-not-exist")


class TestRejectCommand:
    def test_reject_defaults_to_manager(self):
        view = _reject()

        assert view["rejected"] is True
        assert view["rejected_by"] == "manager"
        assert current_domain.repository_for(Review).get("rev-mod").is_rejected

    def test_unknown_review(self):
        with pytest.raises(ObjectNotFoundError):
            _reject(review_id="does-not-exist")


class TestApproveRejectRoundTrip:
    def test_approve_then_reject_clears_approval(self):
        _approve(approved_by="alex")
        view = _reject(rejected_by="sam")

        assert view["approved"] is False
        assert view["approved_at"] is None
        assert view["approved_by"] is None
        assert view["rejected"] is True
        assert view["rejected_by"] == "sam"

    def test_reject_then_approve_clears_rejection(self):
        _reject()
        view = _approve(approved_by="alex")

        assert view["approved"] is True
        assert view["rejected"] is False
        assert view["rejected_by"] is None
