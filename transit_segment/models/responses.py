from typing import List, Optional
from pydantic import BaseModel, Field

# service 별 응답 구조 정의


# 구간(leg) 정보 응답
class LegResponse(BaseModel):
    start_name: str = Field(..., description="출발 역 이름")
    end_name: str = Field(..., description="도착 역 이름")
    line_id: str = Field(..., description="구간 노선")
    description: str = Field(..., description="구간 요약 문자열")
    track_distance: Optional[float] = Field(None, description="선로 거리 (km)")
    straight_distance: Optional[float] = Field(
        None, description="직선 거리 (km, 좌표 없으면 생략)"
    )
    time_minutes: Optional[int] = Field(None, description="예상 소요시간 (분)")
    error_code: Optional[str] = Field(None, description="에러 코드 (실패한 구간)")


# 여정 계산 응답
class JourneyResponse(BaseModel):
    stops: List[str] = Field(..., description="입력 역 토큰")
    summary: str = Field(..., description="', '로 연결된 구간 요약")
    legs: List[LegResponse] = Field(default_factory=list, description="구간 리스트")


# 노선 요약
class LineSummary(BaseModel):
    line_id: str = Field(..., description="노선 ID")
    average_speed: float = Field(..., description="표정속도 (km/h)")
    station_count: int = Field(..., description="역 수")


class LineListResponse(BaseModel):
    lines: List[LineSummary] = Field(default_factory=list, description="노선 목록")
    total_lines: int = Field(..., description="노선 수")


# 에러 응답
class ErrorResponse(BaseModel):
    error: str = Field(..., description="에러 메시지")
    code: Optional[str] = Field(None, description="에러 코드")
