"""
singleton caching 전략 사용
Thread Lock으로 시작 시 한 번만 노선망을 구축하여 메모리에 유지
모든 서비스가 동일한 NetworkModel 인스턴스 참조
=> 구축 이후 읽기 전용 정적 데이터
"""

import logging
from pathlib import Path
from threading import Lock
from typing import Optional, Union

from metro_segment.algorithms.network import NetworkModel
from metro_segment.db.loader import build_network

logger = logging.getLogger(__name__)

_cache_lock = Lock()
_network: Optional[NetworkModel] = None


def initialize_network(path: Optional[Union[str, Path]] = None) -> NetworkModel:
    """
    노선망 초기화 (이미 초기화되었으면 기존 인스턴스 반환)
    """
    global _network

    with _cache_lock:
        if _network is not None:
            logger.info("노선망이 이미 초기화되었습니다.")
            return _network

        logger.info("노선망 초기화 시작")
        _network = build_network(path)
        logger.info(f"✓ 노선 데이터 로드 완료: {len(_network)}개 노선")
        return _network


def get_network() -> NetworkModel:
    """노선망 반환, 초기화 전이면 기본 설정으로 초기화"""
    if _network is None:
        return initialize_network()
    return _network


def reset_network():
    """테스트용 캐시 초기화"""
    global _network

    with _cache_lock:
        _network = None
