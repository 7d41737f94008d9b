from __future__ import annotations

import logging
import uuid

from sqlalchemy.exc import (
    DBAPIError,
    DisconnectionError,
    InterfaceError,
    OperationalError,
    SQLAlchemyError,
    TimeoutError as PoolTimeoutError,
)


logger = logging.getLogger(__name__)


class ResourceError(Exception):
    """Base class for failures raised by the resource layer."""

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        self.code = code


class NotFound(ResourceError):
    pass


class InvalidQuery(ResourceError):
    """Malformed identity, bad filter construction or a store-level rejection."""


class UnknownField(InvalidQuery):
    def __init__(self, resource: str, field: str):
        super().__init__(f"Unknown field '{field}' for {resource}", code="unknown_field")
        self.field = field


class StoreUnavailable(InvalidQuery):
    """The store could not be reached or timed out; the input may be fine."""


_TRANSIENT = (OperationalError, InterfaceError, DisconnectionError, PoolTimeoutError)


def _store_code(exc: SQLAlchemyError) -> str | None:
    orig = getattr(exc, "orig", None)
    for attr in ("pgcode", "sqlstate", "sqlite_errorname"):
        value = getattr(orig, attr, None)
        if value:
            return str(value)
    return getattr(exc, "code", None)


def translate_store_error(exc: SQLAlchemyError) -> InvalidQuery:
    """Map a SQLAlchemy exception onto the resource error taxonomy."""
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        message = str(exc.orig)
    else:
        message = str(exc)
    code = _store_code(exc)
    if isinstance(exc, _TRANSIENT):
        logger.warning("Store unavailable (%s): %s", code, message)
        return StoreUnavailable(message, code)
    logger.warning("Store rejected query (%s): %s", code, message)
    return InvalidQuery(message, code)


def parse_identity(value: str, label: str = "id") -> str:
    try:
        return str(uuid.UUID(str(value)))
    except (TypeError, ValueError):
        raise InvalidQuery(f"Invalid {label} '{value}'", code="invalid_id")
