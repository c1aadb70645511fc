"""
노선 조회 REST API 엔드포인트
"""

from fastapi import APIRouter, Depends
import logging

from metro_segment.algorithms.network import NetworkModel
from metro_segment.api.deps import get_network_model
from metro_segment.core.exceptions import LineNotFoundException
from metro_segment.models.responses import ErrorResponse, LineInfo

router = APIRouter()
logger = logging.getLogger(__name__)


def _to_line_info(line) -> LineInfo:
    return LineInfo(
        line_id=line.line_id,
        name=line.name,
        avg_speed=line.avg_speed,
        stations=line.station_names,
    )


@router.get("")
async def get_all_lines(network: NetworkModel = Depends(get_network_model)):
    """
    전체 노선 목록 조회

    Returns:
        {
            "lines": [{"line_id": "arex", "name": "공항철도", ...}, ...],
            "total_lines": 2
        }
    """
    lines = [_to_line_info(line) for line in network]
    return {"lines": lines, "total_lines": len(lines)}


@router.get(
    "/{line_id}",
    response_model=LineInfo,
    responses={404: {"model": ErrorResponse}},
)
async def get_line(line_id: str, network: NetworkModel = Depends(get_network_model)):
    """
    단일 노선 조회

    Example:
        GET /v1/lines/arex
    """
    line = network.get_line(line_id)
    if line is None:
        raise LineNotFoundException(line_id)
    return _to_line_info(line)
