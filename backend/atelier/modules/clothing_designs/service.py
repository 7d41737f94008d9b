from __future__ import annotations

from atelier.core.resources import ResourceService

from .repository import ClothingDesignRepository
from .schemas import ClothingDesignCreate, ClothingDesignUpdate


class ClothingDesignService(ResourceService[ClothingDesignCreate, ClothingDesignUpdate]):
    repository_class = ClothingDesignRepository
