"""
노선 데이터 적재

- 역간거리 CSV (헤더: 철도운영기관명, 선명, 역명, 역간거리)를 읽어 노선별 누적 거리 계산
- CSV가 없을 때 사용할 폴백 데이터셋(JSON) 로드
"""

import csv
import json
import logging
from typing import Dict, Optional

from transit_segment.core.config import settings
from transit_segment.core.exceptions import DataSourceException
from transit_segment.models.domain import Line

logger = logging.getLogger(__name__)


def load_lines_from_csv(path: str, encoding: Optional[str] = None) -> Dict[str, Line]:
    """
    역간거리 CSV를 노선 맵으로 변환

    파일 순서대로 역간거리를 누적하여 각 역의 누적 거리(distance_from_start)를 만든다.
    CSV에는 좌표가 없으므로 모든 역은 좌표 없음(0.0)으로 적재된다.

    Raises:
        FileNotFoundError: 파일이 없을 때
    """
    lines: Dict[str, Line] = {}
    cumulative: Dict[str, float] = {}
    skipped = 0

    with open(path, "r", encoding=encoding or settings.STATION_DATA_ENCODING, newline="") as f:
        reader = csv.DictReader(f)
        for row_no, row in enumerate(reader, start=2):
            line_id = (row.get(settings.CSV_LINE_COLUMN) or "").strip()
            name = (row.get(settings.CSV_STATION_COLUMN) or "").strip()
            raw_distance = (row.get(settings.CSV_DISTANCE_COLUMN) or "").strip()

            if not line_id or not name:
                logger.warning(f"{row_no}행: 노선/역 이름 누락, 건너뜀")
                skipped += 1
                continue

            try:
                delta = float(raw_distance) if raw_distance else 0.0
            except ValueError:
                logger.warning(f"{row_no}행: 역간거리 형식 오류({raw_distance!r}), 건너뜀")
                skipped += 1
                continue

            line = lines.get(line_id)
            if line is None:
                line = Line(line_id, settings.speed_for(line_id))
                lines[line_id] = line
                cumulative[line_id] = 0.0

            cumulative[line_id] += delta
            line.add_station(name, cumulative[line_id])

    logger.info(
        f"CSV 로드 완료: {len(lines)}개 노선, "
        f"{station_count(lines)}개 역 (건너뜀 {skipped}행) - {path}"
    )
    return lines


def load_lines_from_json(path: str) -> Dict[str, Line]:
    """
    폴백 데이터셋 로드
    지원 데이터 포맷:
        [{"id": "arex", "average_speed": 60.0,
          "stations": [{"name": "계양역", "distance": 0.0, "lat": 37.571, "lon": 126.736}, ...]}]
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw_list = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise DataSourceException(f"폴백 노선 데이터를 읽을 수 없습니다: {path} ({e})") from e

    if not isinstance(raw_list, list):
        raise DataSourceException(f"폴백 노선 데이터가 리스트 형식이 아닙니다: {path}")

    lines: Dict[str, Line] = {}
    for item in raw_list:
        line_id = str(item["id"])
        raw_speed = item.get("average_speed")
        speed = settings.speed_for(line_id) if raw_speed is None else float(raw_speed)
        try:
            line = Line(line_id, speed)
        except ValueError as e:
            raise DataSourceException(f"잘못된 노선 데이터: {path} ({e})") from e
        for st in item.get("stations", []):
            line.add_station(
                st["name"],
                float(st["distance"]),
                float(st.get("lat", 0.0)),
                float(st.get("lon", 0.0)),
            )
        lines[line_id] = line

    logger.info(f"폴백 데이터 로드 완료: {len(lines)}개 노선 - {path}")
    return lines


def load_fallback_lines(path: Optional[str] = None) -> Dict[str, Line]:
    return load_lines_from_json(path or settings.FALLBACK_DATA_PATH)


def station_count(lines: Dict[str, Line]) -> int:
    return sum(len(line.stations) for line in lines.values())
