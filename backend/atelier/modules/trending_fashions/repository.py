from __future__ import annotations

from atelier.core.resources import FieldSpec, RelationSpec, ResourceDescriptor, ResourceRepository
from atelier.modules.clothing_designs.models import ClothingDesign

from .models import TrendingFashion


TRENDING_FASHIONS = ResourceDescriptor(
    name="TrendingFashion",
    model=TrendingFashion,
    fields=(
        FieldSpec("designId", "design_id", searchable=False, readable=False),
        FieldSpec("trendStartDate", "trend_start_date"),
        FieldSpec("trendEndDate", "trend_end_date"),
        FieldSpec("trendDescription", "trend_description"),
    ),
    owner_attr=None,
    relation=RelationSpec(
        alias="design",
        local_attr="design_id",
        target=ClothingDesign,
        fields=(
            FieldSpec("id", "id", searchable=False),
            FieldSpec("designName", "design_name"),
        ),
    ),
)


class TrendingFashionRepository(ResourceRepository):
    descriptor = TRENDING_FASHIONS
