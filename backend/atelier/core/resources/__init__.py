"""Generic descriptor-driven data access shared by the fashion resources."""

from .descriptor import FieldSpec, RelationSpec, ResourceDescriptor
from .merge import merge_update
from .repository import ResourceRepository
from .service import PaginationResult, ResourceService

__all__ = [
    "FieldSpec",
    "RelationSpec",
    "ResourceDescriptor",
    "ResourceRepository",
    "ResourceService",
    "PaginationResult",
    "merge_update",
]
