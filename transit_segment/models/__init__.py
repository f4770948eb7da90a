"""
pydantic models for 응답, 도메인 객체
"""


from transit_segment.models.responses import (
    LegResponse,
    JourneyResponse,
    LineSummary,
    LineListResponse,
    ErrorResponse,
)
from transit_segment.models.domain import Station, Line, SegmentResult, LegResult

__all__ = [
    "LegResponse",
    "JourneyResponse",
    "LineSummary",
    "LineListResponse",
    "ErrorResponse",
    "Station",
    "Line",
    "SegmentResult",
    "LegResult",
]
