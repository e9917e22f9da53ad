"""Product aggregate.

Products live independently of invoices.  Renaming a product or
changing its picture never touches invoices already issued, because
every invoice line carries its own snapshot of name and image.
"""

from __future__ import annotations

from dataclasses import dataclass

from pos.domain.exceptions import ValidationError


@dataclass
class Product:
    """A product in the catalog.

    ``id`` is assigned once and never changes; ``name`` and
    ``image_url`` are editable but may never be blank.
    """

    id: str
    name: str
    image_url: str

    @staticmethod
    def create(product_id: str, name: str | None, image_url: str | None) -> Product:
        """Create a new catalog entry, trimming and validating its fields."""
        return Product(
            id=product_id,
            name=_required(name, "name"),
            image_url=_required(image_url, "imageUrl"),
        )

    def rename(self, new_name: str) -> None:
        self.name = _required(new_name, "name")

    def change_image(self, new_image_url: str) -> None:
        self.image_url = _required(new_image_url, "imageUrl")


def _required(value: str | None, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} required")
    return value.strip()
