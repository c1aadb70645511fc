"""
내장 시연용 노선 데이터

CSV 파일이 없거나 해당 노선이 없을 때 사용
좌표는 서울 인근 대략값, 거리 데이터는 시연을 위한 근사값
"""

from typing import Dict, List, Optional, Tuple

from metro_segment.algorithms.network import NetworkModel

# (역명, 누적거리 km, 위도, 경도)
StationRow = Tuple[str, float, Optional[float], Optional[float]]

SAMPLE_LINES: Dict[str, Dict] = {
    # 공항철도 - 표정속도 약 60km/h 가정
    "arex": {
        "name": "공항철도",
        "avg_speed": 60.0,
        "stations": [
            ("계양역", 0.0, 37.571, 126.736),
            ("김포공항역", 6.6, 37.562, 126.801),
            ("마곡나루역", 9.5, 37.567, 126.829),
        ],
    },
    # 9호선 - 급행 기준 표정속도 약 47km/h 가정
    "9": {
        "name": "9호선",
        "avg_speed": 47.0,
        "stations": [
            ("개화", 0.0, None, None),
            ("김포공항역", 3.6, 37.562, 126.801),
            ("가양", 10.5, None, None),
            ("염창", 13.0, None, None),
            ("당산", 16.5, None, None),
            ("여의도", 19.0, None, None),
            ("노량진역", 22.0, 37.514, 126.942),
        ],
    },
}


def populate_sample_lines(network: NetworkModel, skip_existing: bool = True) -> List[str]:
    """
    내장 데이터를 노선망에 적재

    Args:
        network: 적재 대상 노선망
        skip_existing: 이미 있는 노선은 건너뜀

    Returns:
        적재한 노선 ID 목록
    """
    loaded = []
    for line_id, line_data in SAMPLE_LINES.items():
        if skip_existing and network.has_line(line_id):
            continue

        line = network.add_line(line_id, name=line_data["name"], avg_speed=line_data["avg_speed"])
        for name, distance, lat, lng in line_data["stations"]:
            line.add_station(name, distance, lat, lng)
        loaded.append(line_id)
    return loaded


def build_sample_network() -> NetworkModel:
    network = NetworkModel()
    populate_sample_lines(network)
    return network
