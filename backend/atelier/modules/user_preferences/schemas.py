from __future__ import annotations

from pydantic import Field

from atelier.core.resources.schemas import CamelModel, Page


class UserPreferenceWrite(CamelModel):
    preferred_colors: str | None = Field(None, max_length=500)
    preferred_styles: str | None = Field(None, max_length=500)
    preferred_materials: str | None = Field(None, max_length=500)


class UserPreferenceCreate(UserPreferenceWrite):
    pass


class UserPreferenceUpdate(UserPreferenceWrite):
    pass


class UserPreferenceRead(CamelModel):
    id: str
    preferred_colors: str | None = None
    preferred_styles: str | None = None
    preferred_materials: str | None = None


UserPreferencePage = Page[UserPreferenceRead]
