from __future__ import annotations

from typing import Any

from fastapi import APIRouter, status

from atelier.api.deps import DbDep, OwnerDep, PageDep, split_fields
from .repository import TRENDING_FASHIONS
from .schemas import (
    TrendingFashionCreate,
    TrendingFashionPage,
    TrendingFashionRead,
    TrendingFashionUpdate,
)
from .service import TrendingFashionService


router = APIRouter(prefix="/trendingFashions", tags=["trending-fashions"])

# Trending fashions are shared; the owner dependency only enforces authentication.


@router.get("", response_model=TrendingFashionPage)
def list_trending_fashions(db: DbDep, _: OwnerDep, params: PageDep):
    svc = TrendingFashionService(db)
    return svc.list(None, params.skip, params.limit, params.search)


@router.get("/dropdown", response_model=list[dict[str, Any]])
def trending_fashion_dropdown(
    db: DbDep,
    _: OwnerDep,
    fields: str | None = None,
    keyword: str | None = None,
):
    svc = TrendingFashionService(db)
    return svc.dropdown_search(None, split_fields(fields, TRENDING_FASHIONS.dropdown_default), keyword)


@router.get("/{record_id}", response_model=TrendingFashionRead)
def get_trending_fashion(record_id: str, db: DbDep, _: OwnerDep):
    return TrendingFashionService(db).get_by_id(None, record_id)


@router.post("", response_model=TrendingFashionRead, status_code=status.HTTP_201_CREATED)
def create_trending_fashion(payload: TrendingFashionCreate, db: DbDep, _: OwnerDep):
    return TrendingFashionService(db).create(None, payload)


@router.put("/{record_id}", response_model=TrendingFashionRead)
def update_trending_fashion(
    record_id: str, payload: TrendingFashionUpdate, db: DbDep, _: OwnerDep
):
    return TrendingFashionService(db).update(None, record_id, payload)


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_trending_fashion(record_id: str, db: DbDep, _: OwnerDep) -> None:
    TrendingFashionService(db).delete(None, record_id)
