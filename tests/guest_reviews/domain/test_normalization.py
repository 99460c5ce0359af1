"""Tests for mapping raw Hostaway review objects onto canonical records."""

from datetime import UTC, date, datetime, timedelta, timezone

import pytest
from protean.exceptions import ValidationError
from guest_reviews.review.normalization import (
    ANONYMOUS_GUEST,
    UNKNOWN_PROPERTY,
    derive_rating,
    normalize_categories,
    normalize_review,
    parse_timestamp,
)

RECEIVED_AT = datetime(2024, 6, 1, 9, 30, tzinfo=UTC)


def _raw(**overrides):
    raw = {
        "id": 7453,
        "type": "host-to-guest",
        "status": "published",
        "rating": None,
        "publicReview": "Shane and family are wonderful! Would definitely host again :)",
        "reviewCategory": [
            {"category": "cleanliness", "rating": 10},
            {"category": "communication", "rating": 10},
            {"category": "respect_house_rules", "rating": 10},
        ],
        "submittedAt": "2020-08-21 22:45:14",
        "guestName": "Shane Finkelstein",
        "listingName": "2B N1 A - 29 Shoreditch Heights",
    }
    raw.update(overrides)
    return raw


class TestParseTimestamp:
    def test_hostaway_format(self):
        assert parse_timestamp("2020-08-21 22:45:14") == datetime(2020, 8, 21, 22, 45, 14, tzinfo=UTC)

    def test_iso_with_zulu(self):
        assert parse_timestamp("2024-01-15T00:00:00Z") == datetime(2024, 1, 15, tzinfo=UTC)

    def test_offset_converted_to_utc(self):
        parsed = parse_timestamp("2024-01-15T02:00:00+02:00")
        assert parsed == datetime(2024, 1, 15, tzinfo=UTC)

    def test_date_only(self):
        assert parse_timestamp(date(2024, 3, 1)) == datetime(2024, 3, 1, tzinfo=UTC)

    def test_aware_datetime_passthrough(self):
        value = datetime(2024, 3, 1, 12, tzinfo=timezone(timedelta(hours=1)))
        assert parse_timestamp(value) == datetime(2024, 3, 1, 11, tzinfo=UTC)

    @pytest.mark.parametrize("value", [None, "", "   ", "not a date", 12345])
    def test_unreadable_values(self, value):
        assert parse_timestamp(value) is None


class TestCategories:
    def test_missing_categories(self):
        assert normalize_categories(None) == []

    def test_float_whole_numbers_accepted(self):
        assert normalize_categories([{"category": "cleanliness", "rating": 9.0}]) == [
            {"category": "cleanliness", "rating": 9}
        ]

    def test_fractional_rating_rejected(self):
        with pytest.raises(ValidationError):
            normalize_categories([{"category": "cleanliness", "rating": 8.5}])

    def test_boolean_rating_rejected(self):
        with pytest.raises(ValidationError):
            normalize_categories([{"category": "cleanliness", "rating": True}])

    def test_out_of_scale_rejected(self):
        with pytest.raises(ValidationError):
            normalize_categories([{"category": "cleanliness", "rating": 12}])

    def test_non_list_rejected(self):
        with pytest.raises(ValidationError):
            normalize_categories({"cleanliness": 10})


class TestDeriveRating:
    def test_category_mean_on_display_scale(self):
        categories = [
            {"category": "cleanliness", "rating": 10},
            {"category": "communication", "rating": 8},
        ]
        assert derive_rating(categories) == 4.5

    def test_rounds_half_up(self):
        # mean 8.5 -> 4.25 -> 4.3
        categories = [
            {"category": "cleanliness", "rating": 9},
            {"category": "communication", "rating": 8},
        ]
        assert derive_rating(categories) == 4.3

    def test_no_categories(self):
        assert derive_rating([]) == 0.0


class TestNormalizeReview:
    def test_full_record(self):
        record = normalize_review(_raw(), RECEIVED_AT)

        assert record["review_id"] == "7453"
        assert record["review_type"] == "host-to-guest"
        assert record["channel"] == "hostaway"
        assert record["rating"] == 5.0
        assert record["guest_name"] == "Shane Finkelstein"
        assert record["listing_name"] == "2B N1 A - 29 Shoreditch Heights"
        assert record["submitted_at"] == datetime(2020, 8, 21, 22, 45, 14, tzinfo=UTC)
        assert record["submitted_at_defaulted"] is False
        assert record["upstream_status"] == "published"
        assert len(record["review_categories"]) == 3

    def test_raw_rating_wins_over_categories(self):
        record = normalize_review(_raw(rating=3), RECEIVED_AT)
        assert record["rating"] == 3.0

    def test_derived_rating_from_mixed_categories(self):
        record = normalize_review(
            _raw(
                reviewCategory=[
                    {"category": "cleanliness", "rating": 10},
                    {"category": "communication", "rating": 8},
                ]
            ),
            RECEIVED_AT,
        )
        assert record["rating"] == 4.5

    def test_minimal_record_gets_defaults(self):
        record = normalize_review({"id": "abc"}, RECEIVED_AT)

        assert record["review_type"] == "guest-to-host"
        assert record["rating"] == 0.0
        assert record["public_review"] == ""
        assert record["review_categories"] == []
        assert record["guest_name"] == ANONYMOUS_GUEST
        assert record["listing_name"] == UNKNOWN_PROPERTY
        assert record["listing_id"] is None

    def test_missing_submitted_at_defaults_to_receipt_time(self):
        record = normalize_review(_raw(submittedAt=None), RECEIVED_AT)
        assert record["submitted_at"] == RECEIVED_AT
        assert record["submitted_at_defaulted"] is True

    def test_garbled_submitted_at_defaults_to_receipt_time(self):
        record = normalize_review(_raw(submittedAt="yesterday-ish"), RECEIVED_AT)
        assert record["submitted_at"] == RECEIVED_AT
        assert record["submitted_at_defaulted"] is True

    def test_channel_passed_through(self):
        record = normalize_review(_raw(channel="booking.com"), RECEIVED_AT)
        assert record["channel"] == "booking.com"

    def test_listing_id_passed_through(self):
        record = normalize_review(_raw(listingId="prop-shoreditch"), RECEIVED_AT)
        assert record["listing_id"] == "prop-shoreditch"

    def test_listing_map_id_is_not_a_property_id(self):
        record = normalize_review(_raw(listingMapId=98765), RECEIVED_AT)
        assert record["listing_id"] is None

    def test_missing_id_rejected(self):
        raw = _raw()
        del raw["id"]
        with pytest.raises(ValidationError) as exc:
            normalize_review(raw, RECEIVED_AT)
        assert "Review id is required" in str(exc.value)

    def test_non_mapping_rejected(self):
        with pytest.raises(ValidationError):
            normalize_review(["not", "a", "review"], RECEIVED_AT)

    def test_non_numeric_rating_rejected(self):
        with pytest.raises(ValidationError):
            normalize_review(_raw(rating="five"), RECEIVED_AT)
