"""
노선 데이터 로드 및 캐시
"""

from metro_segment.db.loader import load_network_from_csv, build_network
from metro_segment.db.sample_data import SAMPLE_LINES, build_sample_network
from metro_segment.db.cache import initialize_network, get_network, reset_network

__all__ = [
    "load_network_from_csv",
    "build_network",
    "SAMPLE_LINES",
    "build_sample_network",
    "initialize_network",
    "get_network",
    "reset_network",
]
