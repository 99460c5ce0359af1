"""Repository for the Property aggregate."""

from guest_reviews.domain import guest_reviews
from guest_reviews.property.property import Property


@guest_reviews.repository(part_of=Property)
class PropertyRepository:
    def get_properties(self) -> list[Property]:
        """Every property, in name order."""
        results = self._dao.query.all()
        if results.total > len(results.items):
            results = self._dao.query.limit(results.total).all()
        return sorted(results.items, key=lambda property_: property_.name.lower())

    def get_property_by_id(self, property_id) -> Property:
        return self.get(str(property_id))

    def find_by_category(self, category: str) -> list[Property]:
        category = category.lower()
        return [p for p in self.get_properties() if p.category and p.category.lower() == category]
