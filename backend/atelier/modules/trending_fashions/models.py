from __future__ import annotations

import uuid
from datetime import date, datetime, timezone

from sqlalchemy import Date, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from atelier.core.database import Base


class TrendingFashion(Base):
    __tablename__ = "trending_fashions"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    design_id: Mapped[str | None] = mapped_column(
        String(36), ForeignKey("clothing_designs.id", ondelete="SET NULL"), index=True, nullable=True
    )
    trend_start_date: Mapped[date | None] = mapped_column(Date, default=None)
    trend_end_date: Mapped[date | None] = mapped_column(Date, default=None)
    trend_description: Mapped[str | None] = mapped_column(Text, default=None)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
