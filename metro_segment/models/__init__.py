"""
domain 객체 및 pydantic 결과 모델
"""

from metro_segment.models.domain import (
    Station,
    Line,
    ItineraryStop,
    ItinerarySegment,
)
from metro_segment.models.responses import (
    SegmentResult,
    RouteSegmentEntry,
    RouteReport,
    LineInfo,
    ErrorResponse,
)

__all__ = [
    "Station",
    "Line",
    "ItineraryStop",
    "ItinerarySegment",
    "SegmentResult",
    "RouteSegmentEntry",
    "RouteReport",
    "LineInfo",
    "ErrorResponse",
]
