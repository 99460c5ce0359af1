"""Domain events for the Property aggregate."""

from protean.fields import DateTime, Identifier, Integer, String

from guest_reviews.domain import guest_reviews


@guest_reviews.event(part_of="Property")
class PropertyRegistered:
    """A rentable listing was added to the portfolio."""

    __version__ = 1

    property_id = Identifier(required=True)
    name = String(required=True)
    category = String()
    price = Integer(required=True)
    registered_at = DateTime(required=True)


@guest_reviews.event(part_of="Property")
class PropertyDetailsUpdated:
    """Listing details were overwritten by a later save."""

    __version__ = 1

    property_id = Identifier(required=True)
    name = String(required=True)
    category = String()
    price = Integer(required=True)
    updated_at = DateTime(required=True)
