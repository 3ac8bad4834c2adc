from __future__ import annotations

from sqlalchemy import Column, DateTime, Numeric, String, Text
from sqlalchemy.sql import func

from app.models.base import Base


class Gym(Base):
    __tablename__ = "gyms"

    id = Column(String, primary_key=True)
    title = Column(String, nullable=False, index=True)
    description = Column(Text, nullable=True)
    phone = Column(String, nullable=True)
    # Exact NUMERIC (no precision cap) so coordinates survive save/load unchanged
    latitude = Column(Numeric(asdecimal=True), nullable=False)
    longitude = Column(Numeric(asdecimal=True), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    def __repr__(self) -> str:
        return f"Gym(id={self.id!r}, title={self.title!r})"
