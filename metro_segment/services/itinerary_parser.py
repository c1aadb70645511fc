import logging
from typing import List, Sequence, Tuple

from metro_segment.models.domain import ItineraryStop

logger = logging.getLogger(__name__)


def parse_token(token: str) -> Tuple[str, str]:
    """
    경로 토큰 파싱 (예: "계양역(arex)" -> ("계양역", "arex"))

    첫 번째 '('와 첫 번째 ')'가 모두 있고 ')'가 '(' 뒤에 올 때만 노선으로 인식
    그 외에는 토큰 전체가 역 이름, 노선은 ""

    Args:
        token: 명령행 토큰

    Returns:
        (역 이름, 노선 ID)
    """
    open_paren = token.find("(")
    close_paren = token.find(")")

    if open_paren == -1 or close_paren == -1:
        # 노선 정보 없음 (마지막 역인 경우 등)
        return token, ""

    if close_paren < open_paren:
        logger.warning(f"괄호 순서가 올바르지 않아 노선 없이 처리합니다: {token}")
        return token, ""

    return token[:open_paren], token[open_paren + 1 : close_paren]


def parse_itinerary(tokens: Sequence[str]) -> List[ItineraryStop]:
    """토큰 목록을 순서대로 (역, 노선) 목록으로 변환"""
    stops = []
    for token in tokens:
        name, line_id = parse_token(token)
        stops.append(ItineraryStop(name=name, line_id=line_id))
    return stops
