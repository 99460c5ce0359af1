"""Property aggregate — a rentable listing shown on the public site.

Reviews reach a property through a weak link: a ``listing_id`` equal to the
property id, or the property name appearing in the review's listing name
(case-insensitive). An id from another system therefore still links by name.
When a review links to several properties, the one its ``listing_id`` names
wins during reconciliation. The rating fields are a cache of the
approved reviews linked this way and can be rebuilt at any time.
"""

from datetime import UTC, datetime

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Integer, String, Text

from guest_reviews.domain import guest_reviews
from guest_reviews.property.events import PropertyDetailsUpdated, PropertyRegistered
from guest_reviews.shared.scales import mean, round_rating


@guest_reviews.aggregate
class Property:
    """A listing in the portfolio."""

    name = String(required=True, max_length=255)
    address = String(required=True, max_length=500)
    description = Text()
    price = Integer(required=True)  # Nightly rate
    category = String(max_length=50)
    bedrooms = Integer(default=1, min_value=0)
    bathrooms = Integer(default=1, min_value=0)

    # Cached from approved reviews
    average_rating = Float(default=0.0)
    review_count = Integer(default=0)

    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def price_must_be_positive(self):
        if self.price is not None and self.price <= 0:
            raise ValidationError({"price": ["Nightly price must be greater than zero"]})

    @invariant.post
    def name_must_not_be_blank(self):
        if self.name is not None and not self.name.strip():
            raise ValidationError({"name": ["Property name cannot be empty"]})

    @classmethod
    def register(
        cls,
        name,
        address,
        price,
        description=None,
        category=None,
        bedrooms=None,
        bathrooms=None,
        property_id=None,
    ):
        now = datetime.now(UTC)

        values = {
            "name": name,
            "address": address,
            "price": price,
            "description": description,
            "category": category,
            "bedrooms": bedrooms or 1,
            "bathrooms": bathrooms or 1,
            "average_rating": 0.0,
            "review_count": 0,
            "created_at": now,
            "updated_at": now,
        }
        if property_id:
            values["id"] = property_id

        property_ = cls(**values)
        property_.raise_(
            PropertyRegistered(
                property_id=str(property_.id),
                name=name,
                category=category,
                price=price,
                registered_at=now,
            )
        )
        return property_

    def update_details(self, name, address, price, description=None, category=None, bedrooms=None, bathrooms=None):
        """Replace the descriptive fields. Cached rating fields are kept."""
        now = datetime.now(UTC)

        with atomic_change(self):
            self.name = name
            self.address = address
            self.price = price
            self.description = description
            self.category = category
            self.bedrooms = bedrooms or 1
            self.bathrooms = bathrooms or 1
            self.updated_at = now

        self.raise_(
            PropertyDetailsUpdated(
                property_id=str(self.id),
                name=self.name,
                category=self.category,
                price=self.price,
                updated_at=now,
            )
        )

    def matches(self, review) -> bool:
        """True when ``review`` is linked to this property."""
        if review.listing_id and str(review.listing_id) == str(self.id):
            return True
        return self.name.lower() in (review.listing_name or "").lower()

    def refresh_rating(self, approved_reviews):
        """Rebuild the cached rating from the property's approved reviews."""
        ratings = [review.rating or 0 for review in approved_reviews]
        with atomic_change(self):
            self.average_rating = round_rating(mean(ratings))
            self.review_count = len(ratings)

    def as_dict(self) -> dict:
        return {
            "id": str(self.id),
            "name": self.name,
            "address": self.address,
            "description": self.description,
            "price": self.price,
            "category": self.category,
            "bedrooms": self.bedrooms,
            "bathrooms": self.bathrooms,
            "average_rating": self.average_rating,
            "review_count": self.review_count,
        }
