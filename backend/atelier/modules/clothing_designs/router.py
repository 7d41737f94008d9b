from __future__ import annotations

from typing import Any

from fastapi import APIRouter, status

from atelier.api.deps import DbDep, OwnerDep, PageDep, split_fields
from atelier.modules.trending_fashions.schemas import TrendingFashionSummaryPage
from atelier.modules.trending_fashions.service import TrendingFashionService
from .repository import CLOTHING_DESIGNS
from .schemas import (
    ClothingDesignCreate,
    ClothingDesignPage,
    ClothingDesignRead,
    ClothingDesignUpdate,
)
from .service import ClothingDesignService


router = APIRouter(prefix="/clothingDesigns", tags=["clothing-designs"])


@router.get("/{design_id}/trendingFashion", response_model=TrendingFashionSummaryPage)
def list_trending_fashions_for_design(design_id: str, db: DbDep, _: OwnerDep, params: PageDep):
    svc = TrendingFashionService(db)
    return svc.list_by_design(design_id, params.skip, params.limit, params.search)


@router.get("", response_model=ClothingDesignPage)
def list_clothing_designs(db: DbDep, owner_id: OwnerDep, params: PageDep):
    svc = ClothingDesignService(db)
    return svc.list(owner_id, params.skip, params.limit, params.search)


@router.get("/dropdown", response_model=list[dict[str, Any]])
def clothing_design_dropdown(
    db: DbDep,
    owner_id: OwnerDep,
    fields: str | None = None,
    keyword: str | None = None,
):
    svc = ClothingDesignService(db)
    return svc.dropdown_search(owner_id, split_fields(fields, CLOTHING_DESIGNS.dropdown_default), keyword)


@router.get("/{record_id}", response_model=ClothingDesignRead)
def get_clothing_design(record_id: str, db: DbDep, owner_id: OwnerDep):
    return ClothingDesignService(db).get_by_id(owner_id, record_id)


@router.post("", response_model=ClothingDesignRead, status_code=status.HTTP_201_CREATED)
def create_clothing_design(payload: ClothingDesignCreate, db: DbDep, owner_id: OwnerDep):
    return ClothingDesignService(db).create(owner_id, payload)


@router.put("/{record_id}", response_model=ClothingDesignRead)
def update_clothing_design(
    record_id: str, payload: ClothingDesignUpdate, db: DbDep, owner_id: OwnerDep
):
    return ClothingDesignService(db).update(owner_id, record_id, payload)


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_clothing_design(record_id: str, db: DbDep, owner_id: OwnerDep) -> None:
    ClothingDesignService(db).delete(owner_id, record_id)
