from typing import List, Optional
from dataclasses import dataclass, field

# domain 정의
# 위도/경도 0.0은 "좌표 없음"을 뜻함 (적도 좌표와 구분되지 않는 한계가 있음)


@dataclass(frozen=True)
class Station:
    name: str
    distance_from_start: float  # 노선 시작점으로부터의 누적 거리(km)
    lat: float = 0.0
    lng: float = 0.0


@dataclass
class Line:
    line_id: str
    average_speed: float  # 표정속도(km/h)
    stations: List[Station] = field(default_factory=list)

    def __post_init__(self):
        if self.average_speed <= 0:
            raise ValueError(
                f"표정속도는 0보다 커야 합니다: {self.line_id} ({self.average_speed})"
            )

    def add_station(
        self, name: str, distance: float, lat: float = 0.0, lng: float = 0.0
    ) -> Station:
        station = Station(name, distance, lat, lng)
        self.stations.append(station)
        return station

    def find_station(self, name: str) -> Optional[Station]:
        """역 이름으로 역 찾기 (대소문자 구분, 첫 번째 일치)"""
        for station in self.stations:
            if station.name == name:
                return station
        return None


@dataclass
class SegmentResult:
    start_name: str
    end_name: str
    line_id: str
    track_distance: float  # km
    straight_distance: float  # km, 좌표가 없으면 0.0
    time_minutes: int

    def describe(self) -> str:
        """예: 6.6km(7분, 계양역-김포공항역, 직선 5.8km)"""
        text = (
            f"{self.track_distance:.1f}km"
            f"({self.time_minutes}분, {self.start_name}-{self.end_name}"
        )
        if self.straight_distance > 0:
            text += f", 직선 {self.straight_distance:.1f}km"
        return text + ")"


@dataclass
class LegResult:
    start_name: str
    end_name: str
    line_id: str
    segment: Optional[SegmentResult] = None
    error_code: Optional[str] = None
    error_message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.segment is not None

    def describe(self) -> str:
        if self.segment is not None:
            return self.segment.describe()
        return f"Error: {self.error_message}"
