"""Tests for the Property aggregate and its weak link to reviews."""

import pytest
from protean.exceptions import ValidationError
from guest_reviews.property.events import PropertyDetailsUpdated, PropertyRegistered
from guest_reviews.property.property import Property


class TestRegistration:
    def test_register_sets_details(self, make_property):
        property_ = make_property()

        assert property_.name == "Modern 2BR in Trendy Shoreditch"
        assert property_.price == 125
        assert property_.average_rating == 0.0
        assert property_.review_count == 0
        assert property_.created_at is not None

    def test_register_raises_event(self, make_property):
        property_ = make_property()

        assert len(property_._events) == 1
        event = property_._events[0]
        assert isinstance(event, PropertyRegistered)
        assert event.property_id == str(property_.id)
        assert event.price == 125

    def test_register_with_explicit_id(self, make_property):
        assert make_property(property_id="prop-001").id == "prop-001"

    def test_rooms_default_to_one(self, make_property):
        property_ = make_property(bedrooms=None, bathrooms=None)
        assert property_.bedrooms == 1
        assert property_.bathrooms == 1

    def test_zero_price_rejected(self, make_property):
        with pytest.raises(ValidationError) as exc:
            make_property(price=0)
        assert "Nightly price must be greater than zero" in str(exc.value)

    def test_blank_name_rejected(self, make_property):
        with pytest.raises(ValidationError):
            make_property(name="   ")

    def test_address_required(self):
        with pytest.raises(ValidationError):
            Property.register(name="Somewhere", address=None, price=100)


class TestUpdateDetails:
    def test_update_replaces_details_and_keeps_rating_cache(self, make_property):
        property_ = make_property()
        property_.average_rating = 4.5
        property_.review_count = 2
        property_._events.clear()

        property_.update_details(name="Renamed Loft", address="1 New Road", price=150, category="loft")

        assert property_.name == "Renamed Loft"
        assert property_.price == 150
        assert property_.average_rating == 4.5
        assert property_.review_count == 2
        assert isinstance(property_._events[-1], PropertyDetailsUpdated)


class TestReviewLink:
    def test_name_containment_is_case_insensitive(self, make_property, make_review):
        property_ = make_property()
        review = make_review(listing_name="MODERN 2BR IN TRENDY SHOREDITCH - Apartment")
        assert property_.matches(review)

    def test_unrelated_listing_does_not_match(self, make_property, make_review):
        property_ = make_property()
        assert not property_.matches(make_review(listing_name="Chic Hackney Loft - Industrial Style"))

    def test_listing_id_links_without_name(self, make_property, make_review):
        property_ = make_property(property_id="prop-shoreditch")
        by_id = make_review(listing_id="prop-shoreditch", listing_name="2B N1 A - 29 Shoreditch Heights")

        assert property_.matches(by_id)

    def test_foreign_listing_id_falls_back_to_name(self, make_property, make_review):
        property_ = make_property(property_id="prop-shoreditch")

        assert property_.matches(make_review(listing_id="98765"))
        assert not property_.matches(make_review(listing_id="98765", listing_name="Somewhere Else"))


class TestRatingCache:
    def test_refresh_rating(self, make_property, make_review):
        property_ = make_property()
        property_.refresh_rating([make_review(rating=5.0), make_review(rating=4.0), make_review(rating=4.0)])

        assert property_.average_rating == 4.3
        assert property_.review_count == 3

    def test_refresh_with_no_reviews(self, make_property):
        property_ = make_property()
        property_.refresh_rating([])

        assert property_.average_rating == 0.0
        assert property_.review_count == 0
