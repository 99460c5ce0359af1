"""Shared BDD fixtures and step definitions for review moderation."""

from datetime import UTC, datetime

import pytest
from pytest_bdd import given, parsers, then
from guest_reviews.review.events import ReviewApproved, ReviewIngested, ReviewRejected
from guest_reviews.review.review import Review

_REVIEW_EVENT_CLASSES = {
    "ReviewIngested": ReviewIngested,
    "ReviewApproved": ReviewApproved,
    "ReviewRejected": ReviewRejected,
}


def _new_review(**overrides):
    values = {
        "review_id": "rev-bdd",
        "channel": "airbnb",
        "submitted_at": datetime(2024, 2, 20, tzinfo=UTC),
        "guest_name": "James Wilson",
        "listing_name": "Chic Hackney Loft - Industrial Style",
        "rating": 4.0,
        "public_review": "Cool industrial loft in Hackney.",
        "review_categories": [{"category": "cleanliness", "rating": 8}],
    }
    values.update(overrides)
    return Review.from_feed(**values)


@pytest.fixture()
def incoming_review():
    """Factory for the record a later ingestion would carry."""
    return _new_review


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("a pending review", target_fixture="review")
def pending_review():
    return _new_review()


@given("an approved review", target_fixture="review")
def approved_review():
    review = _new_review()
    review.approve(moderator="alex")
    review._events.clear()
    return review


@given("a rejected review", target_fixture="review")
def rejected_review():
    review = _new_review()
    review.reject(moderator="sam")
    review._events.clear()
    return review


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the review status is "{status}"'))
def review_status_is(review, status):
    assert review.status == status


@then(parsers.cfparse('the review was moderated by "{moderator}"'))
def review_moderated_by(review, moderator):
    assert review.moderated_by == moderator


@then("the review is not shown as approved")
def review_not_approved(review):
    view = review.as_canonical()
    assert view["approved"] is False
    assert view["approved_at"] is None
    assert view["approved_by"] is None


@then("the review is not shown as rejected")
def review_not_rejected(review):
    view = review.as_canonical()
    assert view["rejected"] is False
    assert view["rejected_at"] is None
    assert view["rejected_by"] is None


@then(parsers.cfparse('the review text is "{text}"'))
def review_text_is(review, text):
    assert review.public_review == text


@then(parsers.cfparse("a {event_type} event is raised"))
def review_event_raised(review, event_type):
    event_cls = _REVIEW_EVENT_CLASSES[event_type]
    assert any(
        isinstance(e, event_cls) for e in review._events
    ), f"No {event_type} event found. Events: {[type(e).__name__ for e in review._events]}"
