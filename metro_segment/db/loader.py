import csv
import math
import logging
from pathlib import Path
from typing import Dict, Optional, Union

from metro_segment.algorithms.network import NetworkModel
from metro_segment.core.config import settings
from metro_segment.core.exceptions import DataLoadException
from metro_segment.db.sample_data import populate_sample_lines

logger = logging.getLogger(__name__)


def _parse_float(value: str) -> float:
    number = float(value)
    # nan, inf 는 거리/좌표로 쓸 수 없음
    if not math.isfinite(number):
        raise ValueError(f"유한한 숫자가 아닙니다: {value!r}")
    return number


def _parse_optional_float(value: Optional[str]) -> Optional[float]:
    if value is None or not value.strip():
        return None
    return _parse_float(value)


def load_network_from_csv(
    path: Union[str, Path],
    encoding: Optional[str] = None,
) -> NetworkModel:
    """
    역간거리 CSV 로드 및 노선별 누적 거리 계산

    CSV 형식 (헤더 1줄):
        철도운영기관명, 선명, 역명, 역간거리[, 위도, 경도]

    노선의 첫 행은 누적거리 0.0, 이후 행은 역간거리를 더해 누적
    잘못된 행(숫자 아님, nan/inf 포함)은 경고 로그를 남기고 건너뜀
    읽기 도중 실패하면 일부만 적재된 노선망은 버려짐

    Raises:
        DataLoadException: 파일을 찾을 수 없거나 읽을 수 없을 때
    """
    path = Path(path)
    network = NetworkModel()
    encoding = encoding or settings.CSV_ENCODING

    if not path.exists():
        raise DataLoadException(f"CSV 파일을 찾을 수 없습니다: {path}")

    cumulative: Dict[str, float] = {}
    count = 0

    try:
        with open(path, "r", encoding=encoding, newline="") as f:
            reader = csv.reader(f)
            next(reader, None)  # 헤더 건너뛰기

            for row_no, row in enumerate(reader, start=2):
                if not row or not any(cell.strip() for cell in row):
                    continue
                if len(row) < 4:
                    logger.warning(f"{path}:{row_no} 열 개수 부족, 건너뜀: {row}")
                    continue

                line_id = row[1].strip()
                name = row[2].strip()
                if not line_id or not name:
                    logger.warning(f"{path}:{row_no} 선명/역명 누락, 건너뜀")
                    continue

                try:
                    gap = _parse_float(row[3])
                    lat = _parse_optional_float(row[4] if len(row) > 4 else None)
                    lng = _parse_optional_float(row[5] if len(row) > 5 else None)
                except ValueError as e:
                    logger.warning(f"{path}:{row_no} 숫자 변환 실패, 건너뜀: {e}")
                    continue

                # 노선 첫 역은 기점 (역간거리 무시)
                if line_id in cumulative:
                    cumulative[line_id] += gap
                else:
                    cumulative[line_id] = 0.0

                network.add_station(line_id, name, cumulative[line_id], lat, lng)
                count += 1

    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise DataLoadException(f"CSV 파일을 읽을 수 없습니다: {path} ({e})") from e

    logger.info(f"CSV 로드 완료: {count}개 역, {len(cumulative)}개 노선 ({path})")
    return network


def build_network(path: Optional[Union[str, Path]] = None) -> NetworkModel:
    """
    노선망 구축

    CSV가 있으면 로드한 뒤 CSV에 없는 노선만 내장 데이터로 보충
    CSV가 없거나 읽기에 실패하면 내장 데이터만 사용
    """
    network = NetworkModel()
    path = path if path is not None else settings.STATION_DATA_PATH

    if path:
        try:
            network = load_network_from_csv(path)
        except DataLoadException as e:
            logger.warning(f"{e.message} 기본 데이터만 로드합니다.")

    added = populate_sample_lines(network)
    if added:
        logger.info(f"내장 데이터 적재: {', '.join(added)}")

    return network
