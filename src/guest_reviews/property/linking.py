"""Queries across the weak Property ↔ Review link."""

from protean.utils.globals import current_domain

from guest_reviews.property.property import Property
from guest_reviews.review.review import Review
from guest_reviews.utils.logging import get_logger

logger = get_logger(__name__)


def reviews_for_property(property_, reviews):
    """Reviews linked to ``property_``, whatever their moderation status."""
    return [review for review in reviews if property_.matches(review)]


def get_approved_reviews_for_property(property_id) -> list[Review]:
    property_ = current_domain.repository_for(Property).get_property_by_id(property_id)
    return current_domain.repository_for(Review).approved_for(property_)


def property_listing(property_id) -> dict:
    """A property with the approved reviews the public page shows.

    The cached rating on the property is rebuilt from those reviews and saved
    when it has drifted.
    """
    property_repo = current_domain.repository_for(Property)
    property_ = property_repo.get_property_by_id(property_id)
    approved = current_domain.repository_for(Review).approved_for(property_)

    previous = (property_.average_rating, property_.review_count)
    property_.refresh_rating(approved)
    if (property_.average_rating, property_.review_count) != previous:
        property_repo.add(property_)

    listing = property_.as_dict()
    listing["reviews"] = [review.as_canonical() for review in approved]
    return listing


def reconcile_reviews() -> dict:
    """Reviews that link to no property, or to more than one."""
    properties = current_domain.repository_for(Property).get_properties()

    unmatched = []
    ambiguous = []
    for review in current_domain.repository_for(Review).get_reviews():
        linked = [property_ for property_ in properties if property_.matches(review)]
        pinned = [property_ for property_ in linked if review.listing_id and str(property_.id) == str(review.listing_id)]
        if pinned:
            linked = pinned
        entry = {
            "review_id": str(review.id),
            "listing_name": review.listing_name,
            "listing_id": str(review.listing_id) if review.listing_id else None,
        }
        if not linked:
            unmatched.append(entry)
        elif len(linked) > 1:
            entry["property_ids"] = [str(property_.id) for property_ in linked]
            ambiguous.append(entry)

    if unmatched or ambiguous:
        logger.warning("reviews_need_reconciliation", unmatched=len(unmatched), ambiguous=len(ambiguous))

    return {"unmatched": unmatched, "ambiguous": ambiguous}
