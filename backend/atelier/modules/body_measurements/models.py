from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from atelier.core.database import Base


class BodyMeasurement(Base):
    __tablename__ = "body_measurements"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    height: Mapped[float] = mapped_column(Numeric(8, 2, asdecimal=False))
    weight: Mapped[float] = mapped_column(Numeric(8, 2, asdecimal=False))
    chest_size: Mapped[float | None] = mapped_column(Numeric(8, 2, asdecimal=False), default=None)
    waist_size: Mapped[float | None] = mapped_column(Numeric(8, 2, asdecimal=False), default=None)
    hip_size: Mapped[float | None] = mapped_column(Numeric(8, 2, asdecimal=False), default=None)
    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), index=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
