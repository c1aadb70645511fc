"""
Pytest 설정 및 공통 Fixture
"""

import sys
import pytest
from pathlib import Path

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from metro_segment.algorithms.network import NetworkModel
from metro_segment.db.cache import reset_network
from metro_segment.services.route_service import RouteService
from metro_segment.services.segment_service import SegmentService


@pytest.fixture(autouse=True)
def clean_network_cache():
    """테스트 간 노선망 싱글톤 격리"""
    reset_network()
    yield
    reset_network()


@pytest.fixture
def network():
    """테스트용 노선망 (공항철도, 9호선 일부)"""
    network = NetworkModel()

    arex = network.add_line("arex", name="공항철도", avg_speed=60.0)
    arex.add_station("계양역", 0.0, 37.571, 126.736)
    arex.add_station("김포공항역", 6.6, 37.562, 126.801)
    arex.add_station("마곡나루역", 9.5, 37.567, 126.829)

    line9 = network.add_line("9", name="9호선", avg_speed=47.0)
    line9.add_station("개화", 0.0)
    line9.add_station("김포공항역", 3.6, 37.562, 126.801)
    line9.add_station("당산", 16.5)
    line9.add_station("노량진역", 22.0, 37.514, 126.942)

    return network


@pytest.fixture
def segment_service(network):
    return SegmentService(network)


@pytest.fixture
def route_service(network):
    return RouteService(network)


@pytest.fixture
def sample_csv(tmp_path):
    """역간거리 CSV 샘플 (헤더 + 2개 노선)"""
    path = tmp_path / "distances.csv"
    path.write_text(
        "철도운영기관명,선명,역명,역간거리,위도,경도\n"
        "서울교통공사,2,시청,0.0,37.5657,126.9769\n"
        "서울교통공사,2,을지로입구,0.8,37.566,126.9826\n"
        "서울교통공사,2,을지로3가,0.8,,\n"
        "서울교통공사,4,서울역,1.2\n"
        "서울교통공사,4,회현,0.7\n",
        encoding="utf-8",
    )
    return path
