from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy import inspect
from sqlalchemy.orm import InstrumentedAttribute

from atelier.core.database import Base
from atelier.core.errors import UnknownField


ID_FIELD = "id"


@dataclass(frozen=True)
class FieldSpec:
    """Maps a public (wire) field name onto a model attribute."""

    name: str
    attr: str
    searchable: bool = True
    writable: bool = True
    readable: bool = True


@dataclass(frozen=True)
class RelationSpec:
    """A reference column expanded into a small embedded object on read."""

    alias: str
    local_attr: str
    target: type[Base]
    fields: tuple[FieldSpec, ...]


@dataclass(frozen=True)
class ResourceDescriptor:
    """Everything the generic resource layer needs to know about one model.

    Attribute names are checked against the model's mapped columns when the
    descriptor is built, so a typo fails at import time rather than reaching
    the database.
    """

    name: str
    model: type[Base]
    fields: tuple[FieldSpec, ...]
    owner_attr: str | None = "user_id"
    relation: RelationSpec | None = None
    dropdown_default: tuple[str, ...] = (ID_FIELD,)

    def __post_init__(self) -> None:
        _require_columns(self.model, [f.attr for f in self.fields] + [ID_FIELD, "created_at"])
        if self.owner_attr:
            _require_columns(self.model, [self.owner_attr])
        if self.relation:
            _require_columns(self.model, [self.relation.local_attr])
            _require_columns(self.relation.target, [f.attr for f in self.relation.fields])
        for name in self.dropdown_default:
            self.column(name)

    @property
    def owner_scoped(self) -> bool:
        return self.owner_attr is not None

    def readable_fields(self) -> list[FieldSpec]:
        return [f for f in self.fields if f.readable]

    def search_fields(self) -> list[FieldSpec]:
        return [f for f in self.fields if f.searchable]

    def field(self, name: str) -> FieldSpec:
        for spec in self.fields:
            if spec.name == name:
                return spec
        raise UnknownField(self.name, name)

    def writable_field(self, name: str) -> FieldSpec:
        spec = self.field(name)
        if not spec.writable:
            raise UnknownField(self.name, name)
        return spec

    def column(self, name: str) -> InstrumentedAttribute:
        """Resolve a public field name (or ``id``) to its model column."""
        if name == ID_FIELD:
            return getattr(self.model, ID_FIELD)
        return getattr(self.model, self.field(name).attr)

    def relation_field(self) -> FieldSpec | None:
        if not self.relation:
            return None
        for spec in self.fields:
            if spec.attr == self.relation.local_attr:
                return spec
        return None


def _require_columns(model: type[Base], attrs: list[str]) -> None:
    columns = inspect(model).columns
    missing = [attr for attr in attrs if attr not in columns]
    if missing:
        raise LookupError(f"{model.__name__} has no column(s): {', '.join(missing)}")
