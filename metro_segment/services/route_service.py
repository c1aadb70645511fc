# 경로(여러 구간) 계산 서비스

import logging
from typing import List, Optional, Sequence

from metro_segment.algorithms.network import NetworkModel
from metro_segment.core.config import settings
from metro_segment.core.exceptions import (
    InvalidItineraryException,
    MetroSegmentException,
)
from metro_segment.models.domain import ItinerarySegment
from metro_segment.models.responses import RouteReport, RouteSegmentEntry
from metro_segment.services.itinerary_parser import parse_itinerary
from metro_segment.services.segment_service import SegmentService

logger = logging.getLogger(__name__)


class RouteService:
    def __init__(
        self,
        network: NetworkModel,
        segment_service: Optional[SegmentService] = None,
        delimiter: Optional[str] = None,
    ):
        self.network = network
        self.segment_service = segment_service or SegmentService(network)
        self.delimiter = settings.SEGMENT_DELIMITER if delimiter is None else delimiter

    def build_segments(self, tokens: Sequence[str]) -> List[ItinerarySegment]:
        """
        인접한 토큰 쌍을 구간으로 변환

        i번째 토큰의 노선이 i -> i+1 구간의 노선
        i+1번째 토큰의 괄호 안 노선은 다음 구간용이므로 여기선 무시
        """
        if len(tokens) < 2:
            raise InvalidItineraryException(
                f"경로는 최소 2개 이상의 역이 필요합니다 (입력: {len(tokens)}개)"
            )

        stops = parse_itinerary(tokens)
        return [
            ItinerarySegment(
                start_name=current.name,
                end_name=following.name,
                line_id=current.line_id,
            )
            for current, following in zip(stops, stops[1:])
        ]

    def calculate_route(self, tokens: Sequence[str]) -> str:
        """구간별 결과를 순서대로 구분자로 연결한 문자열"""
        segments = self.build_segments(tokens)
        logger.info(f"경로 계산 요청: {' '.join(tokens)} ({len(segments)}개 구간)")

        results = [
            self.segment_service.calculate_segment(
                segment.start_name, segment.end_name, segment.line_id
            )
            for segment in segments
        ]
        return self.delimiter.join(results)

    def calculate_route_report(self, tokens: Sequence[str]) -> RouteReport:
        """구조화된 경로 리포트 (구간별 결과 + 전체 문자열)"""
        entries = []
        for segment in self.build_segments(tokens):
            try:
                result = self.segment_service.compute_segment(
                    segment.start_name, segment.end_name, segment.line_id
                )
                entry = RouteSegmentEntry(
                    start=segment.start_name,
                    end=segment.end_name,
                    line_id=segment.line_id,
                    text=result.describe(),
                    result=result,
                )
            except MetroSegmentException as e:
                # 실패한 구간도 결과에 포함하고 다음 구간 계속 처리
                entry = RouteSegmentEntry(
                    start=segment.start_name,
                    end=segment.end_name,
                    line_id=segment.line_id,
                    text=f"Error: {e.message}",
                    error_code=e.code,
                )
            entries.append(entry)

        return RouteReport(
            stops=list(tokens),
            segments=entries,
            report=self.delimiter.join(entry.text for entry in entries),
        )
