from __future__ import annotations

from atelier.core.resources import ResourceService

from .repository import UserPreferenceRepository
from .schemas import UserPreferenceCreate, UserPreferenceUpdate


class UserPreferenceService(ResourceService[UserPreferenceCreate, UserPreferenceUpdate]):
    repository_class = UserPreferenceRepository
