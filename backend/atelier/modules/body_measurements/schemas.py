from __future__ import annotations

from pydantic import Field, field_validator

from atelier.core.resources.schemas import CamelModel, Page, round_cents


class BodyMeasurementCreate(CamelModel):
    height: float = Field(..., gt=0)
    weight: float = Field(..., gt=0)
    chest_size: float | None = Field(None, gt=0)
    waist_size: float | None = Field(None, gt=0)
    hip_size: float | None = Field(None, gt=0)

    two_places = field_validator("height", "weight", "chest_size", "waist_size", "hip_size")(round_cents)


class BodyMeasurementUpdate(CamelModel):
    height: float | None = Field(None, gt=0)
    weight: float | None = Field(None, gt=0)
    chest_size: float | None = Field(None, gt=0)
    waist_size: float | None = Field(None, gt=0)
    hip_size: float | None = Field(None, gt=0)

    two_places = field_validator("height", "weight", "chest_size", "waist_size", "hip_size")(round_cents)


class BodyMeasurementRead(CamelModel):
    id: str
    height: float
    weight: float
    chest_size: float | None = None
    waist_size: float | None = None
    hip_size: float | None = None


BodyMeasurementPage = Page[BodyMeasurementRead]
