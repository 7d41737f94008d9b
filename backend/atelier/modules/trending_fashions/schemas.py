from __future__ import annotations

from datetime import date

from pydantic import Field, model_validator

from atelier.core.resources.schemas import CamelModel, Page


class _TrendWindow(CamelModel):
    trend_start_date: date | None = None
    trend_end_date: date | None = None

    @model_validator(mode="after")
    def check_window(self):
        if self.trend_start_date and self.trend_end_date and self.trend_end_date < self.trend_start_date:
            raise ValueError("trendEndDate must not be before trendStartDate")
        return self


class TrendingFashionCreate(_TrendWindow):
    design_id: str = Field(..., min_length=1)
    trend_description: str | None = Field(None, max_length=10_000)


class TrendingFashionUpdate(_TrendWindow):
    design_id: str | None = None
    trend_description: str | None = Field(None, max_length=10_000)


class DesignSummary(CamelModel):
    id: str
    design_name: str | None = None


class TrendingFashionSummary(CamelModel):
    id: str
    trend_start_date: date | None = None
    trend_end_date: date | None = None
    trend_description: str | None = None


class TrendingFashionRead(TrendingFashionSummary):
    design: DesignSummary | None = None


TrendingFashionPage = Page[TrendingFashionRead]
TrendingFashionSummaryPage = Page[TrendingFashionSummary]
