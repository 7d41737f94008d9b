from __future__ import annotations

from typing import Any

from fastapi import APIRouter, status

from atelier.api.deps import DbDep, OwnerDep, PageDep, split_fields
from .repository import USER_PREFERENCES
from .schemas import (
    UserPreferenceCreate,
    UserPreferencePage,
    UserPreferenceRead,
    UserPreferenceUpdate,
)
from .service import UserPreferenceService


router = APIRouter(prefix="/userPreferences", tags=["user-preferences"])


@router.get("", response_model=UserPreferencePage)
def list_user_preferences(db: DbDep, owner_id: OwnerDep, params: PageDep):
    svc = UserPreferenceService(db)
    return svc.list(owner_id, params.skip, params.limit, params.search)


@router.get("/dropdown", response_model=list[dict[str, Any]])
def user_preference_dropdown(
    db: DbDep,
    owner_id: OwnerDep,
    fields: str | None = None,
    keyword: str | None = None,
):
    svc = UserPreferenceService(db)
    return svc.dropdown_search(owner_id, split_fields(fields, USER_PREFERENCES.dropdown_default), keyword)


@router.get("/{record_id}", response_model=UserPreferenceRead)
def get_user_preference(record_id: str, db: DbDep, owner_id: OwnerDep):
    return UserPreferenceService(db).get_by_id(owner_id, record_id)


@router.post("", response_model=UserPreferenceRead, status_code=status.HTTP_201_CREATED)
def create_user_preference(payload: UserPreferenceCreate, db: DbDep, owner_id: OwnerDep):
    return UserPreferenceService(db).create(owner_id, payload)


@router.put("/{record_id}", response_model=UserPreferenceRead)
def update_user_preference(
    record_id: str, payload: UserPreferenceUpdate, db: DbDep, owner_id: OwnerDep
):
    return UserPreferenceService(db).update(owner_id, record_id, payload)


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user_preference(record_id: str, db: DbDep, owner_id: OwnerDep) -> None:
    UserPreferenceService(db).delete(owner_id, record_id)
