"""
거리 계산 및 노선망 모델
"""

from metro_segment.algorithms.distance_calculator import DistanceCalculator, haversine_km
from metro_segment.algorithms.network import NetworkModel

__all__ = [
    "DistanceCalculator",
    "haversine_km",
    "NetworkModel",
]
