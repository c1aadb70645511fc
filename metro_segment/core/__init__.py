"""
Core 설정 및 커스텀 예외
"""

from metro_segment.core.config import settings

from metro_segment.core.exceptions import (
    MetroSegmentException,
    LineNotFoundException,
    StationNotFoundException,
    InvalidDistanceException,
    InvalidItineraryException,
    DataLoadException,
)

__all__ = [
    "settings",
    "MetroSegmentException",
    "LineNotFoundException",
    "StationNotFoundException",
    "InvalidDistanceException",
    "InvalidItineraryException",
    "DataLoadException",
]
