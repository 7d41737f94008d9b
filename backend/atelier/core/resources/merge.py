from __future__ import annotations

from typing import Any, Mapping, TypeVar

from .descriptor import ResourceDescriptor


EntityT = TypeVar("EntityT")


def merge_update(entity: EntityT, patch: Mapping[str, Any], descriptor: ResourceDescriptor) -> EntityT:
    """Shallow-merge ``patch`` (public field names) onto a loaded entity.

    Every key present in the patch is written, explicit None included; keys
    that are absent leave the entity untouched. Unknown or read-only keys are
    rejected before anything is assigned. Nothing is persisted here.
    """
    targets = [(descriptor.writable_field(name).attr, value) for name, value in patch.items()]
    for attr, value in targets:
        setattr(entity, attr, value)
    return entity
