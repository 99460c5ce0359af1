"""Repository for the Review aggregate."""

from protean.exceptions import ObjectNotFoundError

from guest_reviews.domain import guest_reviews
from guest_reviews.review.review import Review


def newest_first(reviews):
    """Sort by submission time, most recent first."""
    return sorted(reviews, key=lambda review: review.submitted_at, reverse=True)


@guest_reviews.repository(part_of=Review)
class ReviewRepository:
    """Review store keyed by the upstream review id.

    The base repository provides ``get`` (raising ``ObjectNotFoundError``)
    and ``add``. Listing methods always return reviews newest first.
    """

    def _all(self) -> list[Review]:
        results = self._dao.query.all()
        # Queries are paginated; fetch everything once the total is known
        if results.total > len(results.items):
            results = self._dao.query.limit(results.total).all()
        return list(results.items)

    def get_reviews(self, review_filter=None) -> list[Review]:
        """All reviews, or those matching ``review_filter``, newest first."""
        reviews = self._all()
        if review_filter is not None:
            return review_filter.apply(reviews)
        return newest_first(reviews)

    def get_review_by_id(self, review_id) -> Review:
        return self.get(str(review_id))

    def upsert(self, review: Review) -> Review:
        """Insert ``review``, or replace the content of the stored review with the same id."""
        try:
            existing = self.get(str(review.id))
        except ObjectNotFoundError:
            review.record_ingestion(replaced_existing=False)
            self.add(review)
            return review

        existing.replace_content(review)
        self.add(existing)
        return existing

    def approved_for(self, property_) -> list[Review]:
        """Approved reviews linked to ``property_``, newest first."""
        return newest_first(review for review in self._all() if review.is_approved and property_.matches(review))
