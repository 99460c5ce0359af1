"""CategoryRating value object — one sub-score of a review on the upstream scale."""

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Integer, String

from guest_reviews.domain import guest_reviews
from guest_reviews.shared.scales import UPSTREAM_SCALE


@guest_reviews.value_object
class CategoryRating:
    """A category key (e.g. ``cleanliness``) with its 0-10 score."""

    category = String(required=True, max_length=100)
    rating = Integer(required=True)

    @invariant.post
    def rating_must_be_on_upstream_scale(self):
        if self.rating is not None and not (0 <= self.rating <= UPSTREAM_SCALE):
            raise ValidationError({"rating": [f"Category rating must be between 0 and {UPSTREAM_SCALE}"]})

    @invariant.post
    def category_must_not_be_blank(self):
        if self.category is not None and not self.category.strip():
            raise ValidationError({"category": ["Category key cannot be empty"]})

    def as_dict(self) -> dict:
        return {"category": self.category, "rating": self.rating}
