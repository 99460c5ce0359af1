"""RegisterProperty — add a listing, or overwrite one that already exists.

When ``property_id`` names a stored property its details are replaced;
otherwise a new property is created (under that id, if one was given).
"""

from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, Integer, String, Text
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from guest_reviews.domain import guest_reviews
from guest_reviews.property.property import Property
from guest_reviews.utils.logging import get_logger

logger = get_logger(__name__)


@guest_reviews.command(part_of="Property")
class RegisterProperty:
    property_id = Identifier()
    name = String(required=True, max_length=255)
    address = String(required=True, max_length=500)
    price = Integer(required=True)
    description = Text()
    category = String(max_length=50)
    bedrooms = Integer()
    bathrooms = Integer()


@guest_reviews.command_handler(part_of=Property)
class RegisterPropertyHandler:
    @handle(RegisterProperty)
    def register_property(self, command):
        repo = current_domain.repository_for(Property)

        details = {
            "name": command.name,
            "address": command.address,
            "price": command.price,
            "description": command.description,
            "category": command.category,
            "bedrooms": command.bedrooms,
            "bathrooms": command.bathrooms,
        }

        if command.property_id:
            try:
                property_ = repo.get(command.property_id)
            except ObjectNotFoundError:
                property_ = Property.register(property_id=command.property_id, **details)
            else:
                property_.update_details(**details)
        else:
            property_ = Property.register(**details)

        repo.add(property_)
        logger.info("property_saved", property_id=str(property_.id), name=property_.name)
        return str(property_.id)
