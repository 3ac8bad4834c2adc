from __future__ import annotations

from sqlalchemy import Column, Date, DateTime, ForeignKey, String, UniqueConstraint
from sqlalchemy.sql import func

from app.models.base import Base


class CheckIn(Base):
    __tablename__ = "check_ins"
    __table_args__ = (
        # One check-in per user per calendar day
        UniqueConstraint("user_id", "check_in_date", name="uq_check_ins_user_id_check_in_date"),
    )

    id = Column(String, primary_key=True)
    user_id = Column(String, nullable=False, index=True)
    gym_id = Column(String, ForeignKey("gyms.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    validated_at = Column(DateTime(timezone=True), nullable=True)
    # Calendar day of created_at in the configured check-in timezone
    check_in_date = Column(Date, nullable=False)

    def __repr__(self) -> str:
        return f"CheckIn(id={self.id!r}, user_id={self.user_id!r}, gym_id={self.gym_id!r})"
