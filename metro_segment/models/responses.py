from typing import List, Optional
from pydantic import BaseModel, Field

# 구간/경로 계산 결과 구조 정의


# 단일 구간 계산 결과
class SegmentResult(BaseModel):
    start: str = Field(..., description="출발역 이름")
    end: str = Field(..., description="도착역 이름")
    line_id: str = Field(..., description="이용 노선")
    track_distance: float = Field(..., ge=0, description="선로 거리 (km)")
    time_minutes: int = Field(..., ge=0, description="소요 시간 (분, 반올림)")
    straight_distance: float = Field(0.0, ge=0, description="직선 거리 (km), 좌표 없으면 0")

    def describe(self) -> str:
        """'9.5km(10분, 계양역-마곡나루역, 직선 8.2km)' 형태의 문자열"""
        text = (
            f"{self.track_distance:.1f}km"
            f"({self.time_minutes}분, {self.start}-{self.end}"
        )
        # 직선 거리 정보가 유의미할 때만 표기
        if self.straight_distance > 0:
            text += f", 직선 {self.straight_distance:.1f}km"
        return text + ")"


# 경로 내 개별 구간 항목 (성공 또는 에러)
class RouteSegmentEntry(BaseModel):
    start: str = Field(..., description="출발역 이름")
    end: str = Field(..., description="도착역 이름")
    line_id: str = Field(..., description="이용 노선 (없으면 빈 문자열)")
    text: str = Field(..., description="구간 결과 문자열 또는 에러 문자열")
    result: Optional[SegmentResult] = Field(None, description="성공 시 계산 결과")
    error_code: Optional[str] = Field(None, description="실패 시 에러 코드")


# 경로 전체 리포트
class RouteReport(BaseModel):
    stops: List[str] = Field(..., description="입력 토큰 목록")
    segments: List[RouteSegmentEntry] = Field(default_factory=list, description="구간 목록")
    report: str = Field(..., description="구분자로 연결된 전체 결과 문자열")


# 노선 정보 응답
class LineInfo(BaseModel):
    line_id: str = Field(..., description="노선 ID")
    name: str = Field(..., description="노선 이름")
    avg_speed: float = Field(..., gt=0, description="표정 속도 (km/h)")
    stations: List[str] = Field(default_factory=list, description="역 이름 순서")


# 에러 응답
class ErrorResponse(BaseModel):
    error: str = Field(..., description="에러 메시지")
    code: Optional[str] = Field(None, description="에러 코드")
