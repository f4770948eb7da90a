import os
import logging
from pathlib import Path
from typing import Dict
from dotenv import load_dotenv

load_dotenv()  # 환경변수 읽어오기

logger = logging.getLogger(__name__)

FALLBACK_LINE_SPEED = 40.0  # km/h

# 패키지에 포함된 기본(폴백) 노선 데이터
DEFAULT_FALLBACK_DATA_PATH = str(
    Path(__file__).resolve().parent.parent / "data" / "fallback_lines.json"
)


def _parse_line_speeds(raw: str) -> Dict[str, float]:
    """'arex:60,9:47' 형태의 문자열을 {노선: 표정속도} 맵으로 변환"""
    speeds: Dict[str, float] = {}
    for item in raw.split(","):
        item = item.strip()
        if not item:
            continue
        line_id, _, speed = item.rpartition(":")
        value = float(speed)
        if value <= 0:
            logger.warning(f"표정속도는 0보다 커야 합니다, 무시: {item}")
            continue
        speeds[line_id.strip()] = value
    return speeds


def _positive_speed(value: float) -> float:
    if value <= 0:
        logger.warning(
            f"DEFAULT_LINE_SPEED는 0보다 커야 합니다({value}), {FALLBACK_LINE_SPEED}km/h 사용"
        )
        return FALLBACK_LINE_SPEED
    return value


class Settings:
    PROJECT_NAME: str = "Transit Segment"
    VERSION: str = "1.0.0"

    DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    PORT: int = int(os.getenv("PORT", 8001))

    # 역간거리 CSV (철도운영기관명, 선명, 역명, 역간거리)
    STATION_DATA_PATH: str = os.getenv(
        "STATION_DATA_PATH", "국가철도공단_서울교통공사 역간거리_20231231.csv"
    )
    STATION_DATA_ENCODING: str = os.getenv("STATION_DATA_ENCODING", "utf-8-sig")

    CSV_LINE_COLUMN: str = os.getenv("CSV_LINE_COLUMN", "선명")
    CSV_STATION_COLUMN: str = os.getenv("CSV_STATION_COLUMN", "역명")
    CSV_DISTANCE_COLUMN: str = os.getenv("CSV_DISTANCE_COLUMN", "역간거리")

    # CSV가 없을 때 사용하는 최소 데이터셋
    FALLBACK_DATA_PATH: str = os.getenv(
        "FALLBACK_DATA_PATH", DEFAULT_FALLBACK_DATA_PATH
    )

    # 표정속도(km/h), 설정에 없는 노선은 기본값 사용
    DEFAULT_LINE_SPEED: float = _positive_speed(
        float(os.getenv("DEFAULT_LINE_SPEED", FALLBACK_LINE_SPEED))
    )
    LINE_SPEEDS: Dict[str, float] = _parse_line_speeds(
        os.getenv("LINE_SPEEDS", "arex:60,9:47")
    )

    def speed_for(self, line_id: str) -> float:
        return self.LINE_SPEEDS.get(line_id, self.DEFAULT_LINE_SPEED)


settings = Settings()  # 모듈화
