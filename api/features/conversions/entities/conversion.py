"""Conversion entity."""
from typing import Optional

from sqlalchemy import Float, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from api.shared.entities.base import BaseEntity


class Conversion(BaseEntity):
    """A currency conversion a user performed. ``created_at`` is its timestamp."""

    __tablename__ = "conversions"

    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    from_currency: Mapped[str] = mapped_column(String(10), nullable=False)
    to_currency: Mapped[str] = mapped_column(String(10), nullable=False)
    amount: Mapped[float] = mapped_column(Float, nullable=False)
    result: Mapped[float] = mapped_column(Float, nullable=False)
    rate: Mapped[Optional[float]] = mapped_column(Float)

    __table_args__ = (
        Index("idx_conversion_user_created", "user_id", "created_at"),
    )
