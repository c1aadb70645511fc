"""
Metro Segment - 명령행 실행

사용법:
    metro-segment 계양역(arex) 김포공항역(9) 노량진역
    metro-segment --data 역간거리.csv 당산(9) 여의도
"""

import argparse
import logging
import sys
from typing import List, Optional

from metro_segment.core.config import settings
from metro_segment.db.cache import initialize_network
from metro_segment.services.route_service import RouteService

USAGE = "Usage: metro-segment <Start(line)> <Transfer(line)> ... <End>"
EXAMPLE = "Ex: metro-segment 계양역(arex) 김포공항역(9) 노량진역"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="metro-segment",
        description="노선별 구간 거리, 소요 시간, 직선 거리 계산",
    )

    parser.add_argument(
        "stops",
        nargs="*",
        help="경로 토큰 (역이름 또는 역이름(노선))",
    )

    parser.add_argument(
        "--data",
        type=str,
        default=None,
        help=f"역간거리 CSV 경로 (기본값: {settings.STATION_DATA_PATH})",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="상세 로그 출력",
    )

    return parser


def configure_logging(verbose: bool):
    if verbose or settings.DEBUG:
        level = logging.DEBUG
    else:
        level = logging.WARNING  # 결과 출력만 남김

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # 1. 입력 검증
    if len(args.stops) < 2:
        print(USAGE)
        print(EXAMPLE)
        return 1

    configure_logging(args.verbose)

    # 2. 데이터 로드
    network = initialize_network(args.data)

    # 3. 경로 처리 및 결과 출력
    print(RouteService(network).calculate_route(args.stops))
    return 0


if __name__ == "__main__":
    sys.exit(main())
