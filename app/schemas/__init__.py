from .check_in import (
    CheckInCreateRequest,
    CheckInHistoryResponse,
    CheckInItem,
    CheckInMetricsResponse,
    CheckInResponse,
)
from .common import ErrorResponse, OkResponse
from .gym import GymCreateRequest, GymItem, GymListResponse, GymResponse

__all__ = [
    "CheckInCreateRequest",
    "CheckInHistoryResponse",
    "CheckInItem",
    "CheckInMetricsResponse",
    "CheckInResponse",
    "ErrorResponse",
    "OkResponse",
    "GymCreateRequest",
    "GymItem",
    "GymListResponse",
    "GymResponse",
]
