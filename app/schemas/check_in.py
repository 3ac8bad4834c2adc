from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CheckInCreateRequest(BaseModel):
    user_id: str = Field(min_length=1, max_length=128, description="User ID")
    latitude: float = Field(ge=-90.0, le=90.0, description="User latitude (-90..90)")
    longitude: float = Field(ge=-180.0, le=180.0, description="User longitude (-180..180)")


class CheckInItem(BaseModel):
    id: str = Field(description="Check-in ID")
    user_id: str
    gym_id: str
    created_at: datetime
    validated_at: datetime | None = Field(default=None, description="Set once validated")

    model_config = ConfigDict(from_attributes=True)


class CheckInResponse(BaseModel):
    check_in: CheckInItem


class CheckInHistoryResponse(BaseModel):
    check_ins: list[CheckInItem]


class CheckInMetricsResponse(BaseModel):
    check_ins_count: int = Field(ge=0, description="Total check-ins of the user")
