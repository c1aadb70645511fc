"""
구간/경로 계산 REST API 엔드포인트
"""

from typing import List

from fastapi import APIRouter, Depends, Query
import logging

from metro_segment.api.deps import get_route_service, get_segment_service
from metro_segment.models.responses import ErrorResponse, RouteReport, SegmentResult
from metro_segment.services.route_service import RouteService
from metro_segment.services.segment_service import SegmentService

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get(
    "/segments",
    response_model=SegmentResult,
    responses={404: {"model": ErrorResponse}},
)
async def calculate_segment(
    start: str = Query(..., min_length=1, description="출발역 이름"),
    end: str = Query(..., min_length=1, description="도착역 이름"),
    line: str = Query(..., min_length=1, description="이용 노선 ID"),
    service: SegmentService = Depends(get_segment_service),
):
    """
    단일 구간 계산

    노선/역이 없으면 404 ErrorResponse (전역 예외 핸들러)

    Example:
        GET /v1/segments?start=계양역&end=마곡나루역&line=arex
    """
    logger.info(f"구간 계산 요청: {start}-{end}({line})")
    return service.compute_segment(start, end, line)


@router.get(
    "/routes",
    response_model=RouteReport,
    responses={400: {"model": ErrorResponse}},
)
async def calculate_route(
    stops: List[str] = Query(..., description="경로 토큰 (예: 계양역(arex))"),
    service: RouteService = Depends(get_route_service),
):
    """
    여러 구간 경로 계산

    구간별 실패는 결과에 에러 문자열로 포함되고 나머지 구간은 계속 계산됨
    역이 2개 미만이면 400 ErrorResponse

    Example:
        GET /v1/routes?stops=계양역(arex)&stops=김포공항역(9)&stops=노량진역
    """
    return service.calculate_route_report(stops)
