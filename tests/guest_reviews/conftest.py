import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def guest_reviews_bed():
    from guest_reviews.domain import guest_reviews

    bed = DomainFixture(guest_reviews)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(guest_reviews_bed):
    with guest_reviews_bed.domain_context():
        yield

        from protean import current_domain

        for _, provider in current_domain.providers.items():
            provider._data_reset()


@pytest.fixture()
def make_review():
    """Build a pending Review straight from normalized values."""
    from datetime import UTC, datetime

    from guest_reviews.review.review import Review

    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        values = {
            "review_id": f"rev-{counter['n']:03d}",
            "channel": "hostaway",
            "submitted_at": datetime(2024, 2, 1, 12, 0, tzinfo=UTC),
            "guest_name": "Test Guest",
            "listing_name": "Modern 2BR in Trendy Shoreditch - Apartment",
            "rating": 4.0,
            "public_review": "Lovely stay.",
            "review_categories": [
                {"category": "cleanliness", "rating": 8},
                {"category": "communication", "rating": 8},
            ],
        }
        values.update(overrides)
        return Review.from_feed(**values)

    return _make


@pytest.fixture()
def make_property():
    from guest_reviews.property.property import Property

    def _make(**overrides):
        values = {
            "name": "Modern 2BR in Trendy Shoreditch",
            "address": "29 Shoreditch Heights, London E1 6JE",
            "price": 125,
            "category": "apartment",
            "bedrooms": 2,
            "bathrooms": 2,
        }
        values.update(overrides)
        return Property.register(**values)

    return _make
