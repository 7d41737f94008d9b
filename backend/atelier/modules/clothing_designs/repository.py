from __future__ import annotations

from atelier.core.resources import FieldSpec, ResourceDescriptor, ResourceRepository

from .models import ClothingDesign


CLOTHING_DESIGNS = ResourceDescriptor(
    name="ClothingDesign",
    model=ClothingDesign,
    fields=(
        FieldSpec("designName", "design_name"),
        FieldSpec("description", "description"),
        FieldSpec("imageUrl", "image_url"),
        FieldSpec("price", "price"),
        FieldSpec("isVirtual", "is_virtual", searchable=False),
        FieldSpec("isCustomizable", "is_customizable", searchable=False),
        FieldSpec("gender", "gender"),
    ),
)


class ClothingDesignRepository(ResourceRepository):
    descriptor = CLOTHING_DESIGNS
