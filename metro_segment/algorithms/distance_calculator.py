import math
from typing import Dict, Optional, Tuple

from metro_segment.core.config import settings


class DistanceCalculator:
    EARTH_RADIUS = settings.EARTH_RADIUS_KM  # km

    def __init__(self, zero_latitude_is_missing: Optional[bool] = None):
        if zero_latitude_is_missing is None:
            zero_latitude_is_missing = settings.ZERO_LATITUDE_IS_MISSING
        self.zero_latitude_is_missing = zero_latitude_is_missing
        self.cache: Dict[Tuple[float, float, float, float], float] = {}

    def is_missing(self, lat: Optional[float]) -> bool:
        """좌표 없음 판정 (None, 설정에 따라 위도 0 포함)"""
        if lat is None:
            return True
        return self.zero_latitude_is_missing and lat == 0

    def calculate_distance(
        self,
        lat1: Optional[float],
        lon1: Optional[float],
        lat2: Optional[float],
        lon2: Optional[float],
    ) -> float:
        """두 좌표 간 직선 거리 계산(km), 좌표 정보 없으면 0"""
        if self.is_missing(lat1) or self.is_missing(lat2):
            return 0.0
        if lon1 is None or lon2 is None:
            return 0.0
        return self.haversine((lat1, lon1), (lat2, lon2))

    def haversine(
        self, coord1: Tuple[float, float], coord2: Tuple[float, float]
    ) -> float:
        """하버사인 공식으로 지구의 곡률 고려하여 두 좌표 간 거리 계산"""
        lat1, lon1 = coord1
        lat2, lon2 = coord2

        # create cache key
        cache_key = (lat1, lon1, lat2, lon2)
        if cache_key in self.cache:
            return self.cache[cache_key]

        # radian convertion
        lat1, lon1, lat2, lon2 = map(math.radians, [lat1, lon1, lat2, lon2])

        # haversine formula
        dlat = lat2 - lat1
        dlon = lon2 - lon1
        a = (
            math.sin(dlat / 2) ** 2
            + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
        )
        c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
        distance = self.EARTH_RADIUS * c

        self.cache[cache_key] = distance

        return distance


_default_calculator = DistanceCalculator()


def haversine_km(
    lat1: Optional[float],
    lon1: Optional[float],
    lat2: Optional[float],
    lon2: Optional[float],
) -> float:
    """기본 설정 DistanceCalculator로 거리 계산(km)"""
    return _default_calculator.calculate_distance(lat1, lon1, lat2, lon2)
