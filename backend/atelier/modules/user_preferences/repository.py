from __future__ import annotations

from atelier.core.resources import FieldSpec, ResourceDescriptor, ResourceRepository

from .models import UserPreference


USER_PREFERENCES = ResourceDescriptor(
    name="UserPreference",
    model=UserPreference,
    fields=(
        FieldSpec("preferredColors", "preferred_colors"),
        FieldSpec("preferredStyles", "preferred_styles"),
        FieldSpec("preferredMaterials", "preferred_materials"),
    ),
)


class UserPreferenceRepository(ResourceRepository):
    descriptor = USER_PREFERENCES
