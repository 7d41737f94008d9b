from __future__ import annotations

from atelier.core.resources import FieldSpec, ResourceDescriptor, ResourceRepository

from .models import BodyMeasurement


BODY_MEASUREMENTS = ResourceDescriptor(
    name="BodyMeasurement",
    model=BodyMeasurement,
    fields=(
        FieldSpec("height", "height"),
        FieldSpec("weight", "weight"),
        FieldSpec("chestSize", "chest_size"),
        FieldSpec("waistSize", "waist_size"),
        FieldSpec("hipSize", "hip_size"),
    ),
)


class BodyMeasurementRepository(ResourceRepository):
    descriptor = BODY_MEASUREMENTS
