from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class GymCreateRequest(BaseModel):
    title: str = Field(min_length=1, description="Gym name")
    description: str | None = Field(default=None, description="Free text description")
    phone: str | None = Field(default=None, description="Contact phone")
    latitude: float = Field(ge=-90.0, le=90.0, description="Latitude (-90..90)")
    longitude: float = Field(ge=-180.0, le=180.0, description="Longitude (-180..180)")


class GymItem(BaseModel):
    id: str = Field(description="Gym ID")
    title: str
    description: str | None = None
    phone: str | None = None
    latitude: Decimal = Field(description="Latitude, exact decimal degrees")
    longitude: Decimal = Field(description="Longitude, exact decimal degrees")
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class GymResponse(BaseModel):
    gym: GymItem


class GymListResponse(BaseModel):
    gyms: list[GymItem] = Field(description="Matching gyms")
