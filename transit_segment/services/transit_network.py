# 지하철 노선망 서비스

import logging
import math
from typing import Dict, List, Optional

from transit_segment.algorithms.distance_calculator import straight_line_distance
from transit_segment.core.config import settings
from transit_segment.core.exceptions import (
    UnknownLineException,
    UnknownStationException,
)
from transit_segment.db.data_loader import (
    load_fallback_lines,
    load_lines_from_csv,
    station_count,
)
from transit_segment.models.domain import Line, SegmentResult

logger = logging.getLogger(__name__)


def round_minutes(minutes: float) -> int:
    """반올림(0.5는 0에서 멀어지는 방향), 예: 6.5 -> 7, 6.4 -> 6"""
    return int(math.copysign(math.floor(abs(minutes) + 0.5), minutes))


class SubwayNetwork:
    """
    노선 ID -> Line 맵
    load() 이후에는 읽기 전용으로 사용 (조회만 하므로 동시 조회에 잠금 불필요)
    """

    def __init__(self, lines: Optional[Dict[str, Line]] = None):
        self.lines: Dict[str, Line] = dict(lines) if lines else {}

    def load(
        self, source: Optional[str] = None, fallback_source: Optional[str] = None
    ) -> None:
        """
        역간거리 CSV 로드, 파일이 없으면 경고 후 폴백 데이터셋 로드

        Args:
            source: CSV 경로 (기본값 settings.STATION_DATA_PATH)
            fallback_source: 폴백 JSON 경로 (기본값 settings.FALLBACK_DATA_PATH)

        CSV를 열거나 디코딩할 수 없거나 노선이 하나도 없을 때도 폴백

        Raises:
            DataSourceException: 폴백 데이터셋까지 읽을 수 없을 때
        """
        path = source or settings.STATION_DATA_PATH

        try:
            lines = load_lines_from_csv(path)
        except FileNotFoundError:
            logger.warning(
                f"CSV 파일을 찾을 수 없습니다: {path}. 기본 데이터만 로드합니다."
            )
            lines = {}
        except (OSError, UnicodeDecodeError) as e:
            # 디렉터리, 권한 없음, 인코딩 불일치(CP949 등)
            logger.warning(
                f"CSV 파일을 읽을 수 없습니다: {path} ({e}). 기본 데이터만 로드합니다."
            )
            lines = {}
        else:
            if not lines:
                logger.warning(
                    f"CSV에서 노선을 찾지 못했습니다(헤더 확인 필요): {path}. "
                    "기본 데이터만 로드합니다."
                )

        self.lines = lines or load_fallback_lines(fallback_source)

        logger.info(
            f"노선망 로드 완료: {len(self.lines)}개 노선, {station_count(self.lines)}개 역"
        )

    def add_line(self, line: Line) -> None:
        self.lines[line.line_id] = line

    def get_line(self, line_id: str) -> Line:
        line = self.lines.get(line_id)
        if line is None:
            raise UnknownLineException(line_id)
        return line

    @property
    def line_ids(self) -> List[str]:
        return list(self.lines.keys())

    def compute_segment(
        self, start_name: str, end_name: str, line_id: str
    ) -> SegmentResult:
        """
        한 노선 위 두 역 사이 구간 계산

        Returns:
            선로 거리, 직선 거리, 예상 소요시간(분)을 담은 SegmentResult

        Raises:
            UnknownLineException: 노선이 없을 때
            UnknownStationException: 노선에 출발/도착 역이 없을 때
        """
        line = self.get_line(line_id)
        start = line.find_station(start_name)
        end = line.find_station(end_name)

        if start is None or end is None:
            raise UnknownStationException(start_name, end_name)

        # 1. 선로 거리 (방향 무관)
        track_distance = abs(start.distance_from_start - end.distance_from_start)

        # 2. 직선 거리 (좌표 없으면 0.0)
        straight_distance = straight_line_distance(
            start.lat, start.lng, end.lat, end.lng
        )

        # 3. 소요 시간(분) = 거리 / 표정속도 * 60
        time_minutes = round_minutes(track_distance / line.average_speed * 60.0)

        logger.debug(
            f"구간 계산: {start_name}-{end_name} ({line_id}) "
            f"거리={track_distance:.1f}km, 시간={time_minutes}분"
        )

        return SegmentResult(
            start_name=start_name,
            end_name=end_name,
            line_id=line_id,
            track_distance=track_distance,
            straight_distance=straight_distance,
            time_minutes=time_minutes,
        )


_transit_network: Optional[SubwayNetwork] = None


def get_transit_network() -> SubwayNetwork:
    """노선망 싱글톤 인스턴스 반환 (최초 호출 시 로드)"""
    global _transit_network
    if _transit_network is None:
        network = SubwayNetwork()
        network.load()
        _transit_network = network
    return _transit_network
