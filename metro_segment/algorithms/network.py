"""
노선망 모델

노선 ID -> Line 매핑을 보관하고 노선 내 역 조회를 제공
시작 시 한 번 구축한 뒤 읽기 전용으로 사용 (단일 스레드 구축 가정)
"""

import math
import logging
from typing import Dict, Iterator, List, Optional

from metro_segment.core.config import settings
from metro_segment.models.domain import Line, Station

logger = logging.getLogger(__name__)


class NetworkModel:
    def __init__(self):
        self.lines: Dict[str, Line] = {}

    def add_line(
        self,
        line_id: str,
        name: Optional[str] = None,
        avg_speed: Optional[float] = None,
    ) -> Line:
        """노선 등록, 이미 있으면 기존 노선 반환"""
        existing = self.lines.get(line_id)
        if existing is not None:
            return existing

        if avg_speed is None:
            avg_speed = settings.DEFAULT_LINE_SPEED
        if not math.isfinite(avg_speed) or avg_speed <= 0:
            raise ValueError(f"표정 속도는 0보다 큰 유한한 값이어야 합니다: {line_id}={avg_speed}")

        line = Line(line_id=line_id, name=name or line_id, avg_speed=avg_speed)
        self.lines[line_id] = line
        logger.debug(f"노선 등록: {line_id} ({line.name}, {avg_speed}km/h)")
        return line

    def add_station(
        self,
        line_id: str,
        name: str,
        track_distance: float,
        lat: Optional[float] = None,
        lng: Optional[float] = None,
    ) -> Station:
        """노선에 역 추가, 노선이 없으면 기본 속도로 생성"""
        line = self.add_line(line_id)
        return line.add_station(name, track_distance, lat, lng)

    def get_line(self, line_id: str) -> Optional[Line]:
        return self.lines.get(line_id)

    def has_line(self, line_id: str) -> bool:
        return line_id in self.lines

    def find_station(self, line_id: str, name: str) -> Optional[Station]:
        line = self.lines.get(line_id)
        if line is None:
            return None
        return line.find_station(name)

    @property
    def line_ids(self) -> List[str]:
        return list(self.lines.keys())

    def __contains__(self, line_id: str) -> bool:
        return self.has_line(line_id)

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self.lines.values())
