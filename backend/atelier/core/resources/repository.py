from __future__ import annotations

from contextlib import contextmanager
from typing import Any, ClassVar, Iterator, Sequence

from sqlalchemy import ColumnElement, Select, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from atelier.core.database import Base
from atelier.core.errors import InvalidQuery, translate_store_error

from .descriptor import ID_FIELD, ResourceDescriptor
from .pipeline import build_search, join_relation, nest_record, paginate, read_page


class ResourceRepository:
    """Data access for one descriptor-backed model.

    Reads return plain dicts keyed by public field names; writes take and
    return model instances. Every query goes through ``_scope`` first so the
    owner filter cannot be skipped.
    """

    descriptor: ClassVar[ResourceDescriptor]

    def __init__(self, db: Session):
        self.db = db

    @property
    def model(self) -> type[Base]:
        return self.descriptor.model

    @contextmanager
    def _store_errors(self) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise translate_store_error(exc) from exc
        except OverflowError as exc:
            # Integers past the driver's range never reach the store.
            self.db.rollback()
            raise InvalidQuery(str(exc), code="out_of_range") from exc

    def _scope(self, stmt: Select, owner_id: str | None) -> Select:
        if self.descriptor.owner_scoped:
            stmt = stmt.where(getattr(self.model, self.descriptor.owner_attr) == owner_id)
        return stmt

    # ---- Reads ----
    def _projection(
        self,
        owner_id: str | None,
        *,
        search: str | None = None,
        where: Sequence[ColumnElement[bool]] = (),
        join: bool = True,
    ) -> Select:
        columns = [getattr(self.model, ID_FIELD).label(ID_FIELD)]
        columns += [getattr(self.model, f.attr).label(f.name) for f in self.descriptor.readable_fields()]
        stmt = self._scope(select(*columns), owner_id)
        for clause in where:
            stmt = stmt.where(clause)

        search_columns = [getattr(self.model, f.attr) for f in self.descriptor.search_fields()]
        relation = self.descriptor.relation
        if join and relation:
            stmt, related = join_relation(stmt, getattr(self.model, relation.local_attr), relation)
            search_columns += [related[f.name] for f in relation.fields if f.searchable]

        predicate = build_search(search, search_columns)
        if predicate is not None:
            stmt = stmt.where(predicate)
        return stmt

    def page(
        self,
        owner_id: str | None,
        skip: int,
        limit: int,
        search: str | None = None,
        *,
        where: Sequence[ColumnElement[bool]] = (),
        join: bool = True,
    ) -> tuple[list[dict[str, Any]], int]:
        stmt = self._projection(owner_id, search=search, where=where, join=join)
        order_by = (self.model.created_at, getattr(self.model, ID_FIELD))
        with self._store_errors():
            rows = self.db.execute(paginate(stmt, order_by, skip, limit)).all()
        return read_page(rows)

    def find_one(self, owner_id: str | None, record_id: str) -> dict[str, Any] | None:
        stmt = self._projection(owner_id, where=[getattr(self.model, ID_FIELD) == record_id])
        with self._store_errors():
            row = self.db.execute(stmt).first()
        return nest_record(row._mapping) if row is not None else None

    def get_entity(self, owner_id: str | None, record_id: str) -> Base | None:
        stmt = self._scope(select(self.model), owner_id).where(getattr(self.model, ID_FIELD) == record_id)
        with self._store_errors():
            return self.db.scalar(stmt)

    def dropdown(
        self, owner_id: str | None, fields: Sequence[str], keyword: str | None, limit: int
    ) -> list[dict[str, Any]]:
        columns = {name: self.descriptor.column(name) for name in fields}
        stmt = self._scope(select(*(column.label(name) for name, column in columns.items())), owner_id)
        predicate = build_search(keyword, list(columns.values()))
        if predicate is not None:
            stmt = stmt.where(predicate)
        stmt = stmt.order_by(self.model.created_at, getattr(self.model, ID_FIELD)).limit(limit)
        with self._store_errors():
            return [dict(row._mapping) for row in self.db.execute(stmt)]

    def exists(self, model: type[Base], record_id: str) -> bool:
        stmt = select(getattr(model, ID_FIELD)).where(getattr(model, ID_FIELD) == record_id)
        with self._store_errors():
            return self.db.scalar(stmt) is not None

    # ---- Writes ----
    def add(self, entity: Base) -> Base:
        with self._store_errors():
            self.db.add(entity)
            self.db.commit()
            self.db.refresh(entity)
        return entity

    def save(self, entity: Base) -> Base:
        return self.add(entity)

    def delete(self, entity: Base) -> None:
        with self._store_errors():
            self.db.delete(entity)
            self.db.commit()
