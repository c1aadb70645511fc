# custom exception 정의 및 관리
from typing import List, Optional


class MetroSegmentException(Exception):  # 예외 구조 정의
    def __init__(self, message: str, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class LineNotFoundException(MetroSegmentException):
    def __init__(self, line_id: str, message: Optional[str] = None):
        self.line_id = line_id
        super().__init__(
            message or f"존재하지 않는 노선({line_id})", code="LINE_NOT_FOUND"
        )


class StationNotFoundException(MetroSegmentException):
    def __init__(self, missing: List[str], message: Optional[str] = None):
        self.missing = list(missing)
        super().__init__(
            message or f"역을 찾을 수 없음 ({' or '.join(self.missing)})",
            code="STATION_NOT_FOUND",
        )


class InvalidDistanceException(MetroSegmentException):
    def __init__(self, message: str = "거리 데이터가 올바르지 않습니다"):
        super().__init__(message, code="INVALID_DISTANCE")


class InvalidItineraryException(MetroSegmentException):
    def __init__(self, message: str = "경로는 최소 2개 이상의 역이 필요합니다"):
        super().__init__(message, code="INVALID_ITINERARY")


class DataLoadException(MetroSegmentException):
    def __init__(self, message: str = "노선 데이터를 불러올 수 없습니다"):
        super().__init__(message, code="DATA_LOAD_ERROR")
