# 구간 계산 서비스

import math
import logging
from typing import Optional

from metro_segment.algorithms.distance_calculator import DistanceCalculator
from metro_segment.algorithms.network import NetworkModel
from metro_segment.core.exceptions import (
    InvalidDistanceException,
    LineNotFoundException,
    MetroSegmentException,
    StationNotFoundException,
)
from metro_segment.models.responses import SegmentResult

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """표시용 반올림 (0.5는 올림)"""
    return int(math.floor(value + 0.5))


class SegmentService:
    """노선 하나 위의 두 역 사이 선로 거리, 소요 시간, 직선 거리 계산"""

    def __init__(
        self,
        network: NetworkModel,
        distance_calc: Optional[DistanceCalculator] = None,
    ):
        self.network = network
        self.distance_calc = distance_calc or DistanceCalculator()

    def compute_segment(
        self, start_name: str, end_name: str, line_id: str
    ) -> SegmentResult:
        """
        구간 계산

        Args:
            start_name: 출발역 이름
            end_name: 도착역 이름
            line_id: 이용 노선 ID

        Returns:
            SegmentResult

        Raises:
            LineNotFoundException: 노선이 없을 때
            StationNotFoundException: 노선에서 역을 찾을 수 없을 때
            InvalidDistanceException: 누적 거리나 좌표가 유한한 값이 아닐 때
        """
        line = self.network.get_line(line_id)
        if line is None:
            raise LineNotFoundException(line_id)

        start = line.find_station(start_name)
        end = line.find_station(end_name)

        if start is None or end is None:
            missing = [
                name
                for name, station in ((start_name, start), (end_name, end))
                if station is None
            ]
            raise StationNotFoundException(missing)

        # 1. 선로 거리 (순서 무관)
        distance = abs(start.track_distance - end.track_distance)

        # 2. 직선 거리 (좌표 없으면 0)
        straight = self.distance_calc.calculate_distance(
            start.lat, start.lng, end.lat, end.lng
        )

        if not (math.isfinite(distance) and math.isfinite(straight)):
            raise InvalidDistanceException(
                f"거리 데이터가 올바르지 않습니다 ({start_name}-{end_name}, {line_id})"
            )

        # 3. 소요 시간(분) = 거리 * 60 / 표정속도 (0.5분 경계에서 부동소수 오차 없이 반올림)
        time_minutes = distance * 60.0 / line.avg_speed

        logger.debug(
            f"구간 계산: {start_name}-{end_name}({line_id}), "
            f"거리={distance:.2f}km, 시간={time_minutes:.2f}분, 직선={straight:.2f}km"
        )

        return SegmentResult(
            start=start_name,
            end=end_name,
            line_id=line_id,
            track_distance=distance,
            time_minutes=round_half_up(time_minutes),
            straight_distance=straight,
        )

    def calculate_segment(self, start_name: str, end_name: str, line_id: str) -> str:
        """구간 결과 문자열, 실패 시 "Error: ..." 문자열 반환"""
        try:
            return self.compute_segment(start_name, end_name, line_id).describe()
        except MetroSegmentException as e:
            logger.info(f"구간 계산 실패: {e.code} {e.message}")
            return f"Error: {e.message}"
