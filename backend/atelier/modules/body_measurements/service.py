from __future__ import annotations

from atelier.core.resources import ResourceService

from .repository import BodyMeasurementRepository
from .schemas import BodyMeasurementCreate, BodyMeasurementUpdate


class BodyMeasurementService(ResourceService[BodyMeasurementCreate, BodyMeasurementUpdate]):
    repository_class = BodyMeasurementRepository
