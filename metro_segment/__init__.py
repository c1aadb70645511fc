"""
Metro Segment

노선망 위 구간별 선로 거리, 소요 시간, 직선 거리 계산
"""

__version__ = "1.0.0"
