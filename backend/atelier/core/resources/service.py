from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, ClassVar, Generic, Sequence, TypeVar

from pydantic import BaseModel
from sqlalchemy.orm import Session

from atelier.core.config import settings
from atelier.core.errors import InvalidQuery, NotFound, parse_identity

from .merge import merge_update
from .repository import ResourceRepository


logger = logging.getLogger(__name__)

CreateT = TypeVar("CreateT", bound=BaseModel)
UpdateT = TypeVar("UpdateT", bound=BaseModel)


@dataclass
class PaginationResult:
    result: list[dict[str, Any]] = field(default_factory=list)
    total: int = 0


class ResourceService(Generic[CreateT, UpdateT]):
    """CRUD, listing and dropdown search for one resource.

    Subclasses only bind ``repository_class``; everything else is driven by
    the repository's descriptor. ``owner_id`` is ignored for resources that
    are not owner-scoped.
    """

    repository_class: ClassVar[type[ResourceRepository]]

    def __init__(self, db: Session):
        self.db = db
        self.repo = self.repository_class(db)
        self.descriptor = self.repo.descriptor

    def _owner(self, owner_id: str | None) -> str | None:
        if not self.descriptor.owner_scoped:
            return None
        if owner_id is None:
            raise InvalidQuery(f"{self.descriptor.name} requires an owner", code="invalid_id")
        return parse_identity(owner_id, "owner id")

    def list(
        self,
        owner_id: str | None,
        skip: int,
        limit: int,
        search: str | None = None,
    ) -> PaginationResult:
        owner = self._owner(owner_id)
        records, total = self.repo.page(owner, skip, limit, search)
        logger.debug(
            "Listed %s: owner=%s skip=%d limit=%d search=%r -> %d/%d",
            self.descriptor.name, owner, skip, limit, search, len(records), total,
        )
        return PaginationResult(result=records, total=total)

    def get_by_id(self, owner_id: str | None, record_id: str) -> dict[str, Any]:
        owner = self._owner(owner_id)
        record = self.repo.find_one(owner, parse_identity(record_id))
        if record is None:
            raise NotFound(f"{self.descriptor.name} not found")
        return record

    def create(self, owner_id: str | None, data: CreateT) -> dict[str, Any]:
        owner = self._owner(owner_id)
        values = self._writable_values(data.model_dump(by_alias=True, exclude_unset=True))
        entity = self.descriptor.model(**values)
        if owner is not None:
            setattr(entity, self.descriptor.owner_attr, owner)
        self.repo.add(entity)
        logger.info("Created %s %s", self.descriptor.name, entity.id)
        return self.get_by_id(owner, entity.id)

    def update(self, owner_id: str | None, record_id: str, data: UpdateT) -> dict[str, Any]:
        owner = self._owner(owner_id)
        entity = self._load(owner, record_id)
        patch = data.model_dump(by_alias=True, exclude_unset=True)
        self._check_relation(patch)
        self._check_patch(entity, patch)
        merge_update(entity, patch, self.descriptor)
        self.repo.save(entity)
        logger.info("Updated %s %s fields=%s", self.descriptor.name, entity.id, sorted(patch))
        return self.get_by_id(owner, entity.id)

    def delete(self, owner_id: str | None, record_id: str) -> None:
        owner = self._owner(owner_id)
        entity = self._load(owner, record_id)
        self.repo.delete(entity)
        logger.info("Deleted %s %s", self.descriptor.name, record_id)

    def dropdown_search(
        self,
        owner_id: str | None,
        fields: Sequence[str],
        keyword: str | None,
    ) -> list[dict[str, Any]]:
        owner = self._owner(owner_id)
        names = list(dict.fromkeys(fields))
        if not names:
            # An empty disjunction matches nothing.
            return []
        records = self.repo.dropdown(owner, names, keyword, settings.DROPDOWN_LIMIT)
        logger.debug("Dropdown %s fields=%s keyword=%r -> %d", self.descriptor.name, names, keyword, len(records))
        return records

    # ---- Helpers ----
    def _load(self, owner: str | None, record_id: str):
        entity = self.repo.get_entity(owner, parse_identity(record_id))
        if entity is None:
            raise NotFound(f"{self.descriptor.name} not found")
        return entity

    def _writable_values(self, payload: dict[str, Any]) -> dict[str, Any]:
        self._check_relation(payload)
        return {self.descriptor.writable_field(name).attr: value for name, value in payload.items()}

    def _check_patch(self, entity, patch: dict[str, Any]) -> None:
        """Hook for rules that span stored and incoming values; raise InvalidQuery."""

    def _check_relation(self, payload: dict[str, Any]) -> None:
        spec = self.descriptor.relation_field()
        if spec is None or payload.get(spec.name) is None:
            return
        target_id = parse_identity(payload[spec.name], spec.name)
        if not self.repo.exists(self.descriptor.relation.target, target_id):
            raise InvalidQuery(
                f"{self.descriptor.relation.target.__name__} '{target_id}' does not exist",
                code="unknown_reference",
            )
        payload[spec.name] = target_id
