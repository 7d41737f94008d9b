from __future__ import annotations

from typing import Any

from fastapi import APIRouter, status

from atelier.api.deps import DbDep, OwnerDep, PageDep, split_fields
from .repository import BODY_MEASUREMENTS
from .schemas import (
    BodyMeasurementCreate,
    BodyMeasurementPage,
    BodyMeasurementRead,
    BodyMeasurementUpdate,
)
from .service import BodyMeasurementService


router = APIRouter(prefix="/bodyMeasurements", tags=["body-measurements"])


@router.get("", response_model=BodyMeasurementPage)
def list_body_measurements(db: DbDep, owner_id: OwnerDep, params: PageDep):
    svc = BodyMeasurementService(db)
    return svc.list(owner_id, params.skip, params.limit, params.search)


@router.get("/dropdown", response_model=list[dict[str, Any]])
def body_measurement_dropdown(
    db: DbDep,
    owner_id: OwnerDep,
    fields: str | None = None,
    keyword: str | None = None,
):
    svc = BodyMeasurementService(db)
    return svc.dropdown_search(owner_id, split_fields(fields, BODY_MEASUREMENTS.dropdown_default), keyword)


@router.get("/{record_id}", response_model=BodyMeasurementRead)
def get_body_measurement(record_id: str, db: DbDep, owner_id: OwnerDep):
    return BodyMeasurementService(db).get_by_id(owner_id, record_id)


@router.post("", response_model=BodyMeasurementRead, status_code=status.HTTP_201_CREATED)
def create_body_measurement(payload: BodyMeasurementCreate, db: DbDep, owner_id: OwnerDep):
    return BodyMeasurementService(db).create(owner_id, payload)


@router.put("/{record_id}", response_model=BodyMeasurementRead)
def update_body_measurement(
    record_id: str, payload: BodyMeasurementUpdate, db: DbDep, owner_id: OwnerDep
):
    return BodyMeasurementService(db).update(owner_id, record_id, payload)


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_body_measurement(record_id: str, db: DbDep, owner_id: OwnerDep) -> None:
    BodyMeasurementService(db).delete(owner_id, record_id)
