"""
Business logic services
"""

from metro_segment.services.itinerary_parser import parse_token, parse_itinerary
from metro_segment.services.segment_service import SegmentService
from metro_segment.services.route_service import RouteService

__all__ = [
    "parse_token",
    "parse_itinerary",
    "SegmentService",
    "RouteService",
]
