from __future__ import annotations

import logging
from typing import Any

from atelier.core.errors import InvalidQuery, parse_identity
from atelier.core.resources import PaginationResult, ResourceService

from .models import TrendingFashion
from .repository import TrendingFashionRepository
from .schemas import TrendingFashionCreate, TrendingFashionUpdate


logger = logging.getLogger(__name__)


class TrendingFashionService(ResourceService[TrendingFashionCreate, TrendingFashionUpdate]):
    repository_class = TrendingFashionRepository

    def _check_patch(self, entity: TrendingFashion, patch: dict[str, Any]) -> None:
        # A patch may move one end of the window; compare against the stored other end.
        start = patch.get("trendStartDate", entity.trend_start_date)
        end = patch.get("trendEndDate", entity.trend_end_date)
        if start and end and end < start:
            raise InvalidQuery("trendEndDate must not be before trendStartDate", code="invalid_window")

    def list_by_design(
        self,
        design_id: str,
        skip: int,
        limit: int,
        search: str | None = None,
    ) -> PaginationResult:
        """Page through the entries pointing at one design, without embedding it."""
        design_id = parse_identity(design_id, "designId")
        records, total = self.repo.page(
            None,
            skip,
            limit,
            search,
            where=[TrendingFashion.design_id == design_id],
            join=False,
        )
        logger.debug("Listed TrendingFashion for design %s -> %d/%d", design_id, len(records), total)
        return PaginationResult(result=records, total=total)
