from __future__ import annotations

from pydantic import Field, field_validator

from atelier.core.resources.schemas import CamelModel, Page, round_cents


class ClothingDesignCreate(CamelModel):
    design_name: str = Field(..., min_length=1, max_length=200)
    description: str | None = Field(None, max_length=10_000)
    image_url: str | None = Field(None, max_length=2048)
    price: float | None = Field(None, ge=0)
    is_virtual: bool = False
    is_customizable: bool = False
    gender: str | None = Field(None, max_length=50)

    two_places = field_validator("price")(round_cents)


class ClothingDesignUpdate(CamelModel):
    design_name: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = Field(None, max_length=10_000)
    image_url: str | None = Field(None, max_length=2048)
    price: float | None = Field(None, ge=0)
    is_virtual: bool | None = None
    is_customizable: bool | None = None
    gender: str | None = Field(None, max_length=50)

    two_places = field_validator("price")(round_cents)


class ClothingDesignRead(CamelModel):
    id: str
    design_name: str
    description: str | None = None
    image_url: str | None = None
    price: float | None = None
    is_virtual: bool = False
    is_customizable: bool = False
    gender: str | None = None


ClothingDesignPage = Page[ClothingDesignRead]
