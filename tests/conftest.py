"""
Pytest 설정 및 공통 Fixture
"""

import sys
import pytest
from pathlib import Path

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from transit_segment.core.config import DEFAULT_FALLBACK_DATA_PATH
from transit_segment.models.domain import Line
from transit_segment.services.transit_network import SubwayNetwork


@pytest.fixture
def fallback_network(tmp_path):
    """폴백 데이터셋(arex, 9호선)으로 로드한 노선망 (CSV 없음)"""
    network = SubwayNetwork()
    network.load(str(tmp_path / "missing.csv"), DEFAULT_FALLBACK_DATA_PATH)
    return network


@pytest.fixture
def sample_line():
    """테스트용 2호선 일부 (좌표 포함/미포함 혼합)"""
    line = Line("2", 30.0)
    line.add_station("시청", 0.0, 37.5657, 126.9769)
    line.add_station("을지로입구", 0.8, 37.5660, 126.9826)
    line.add_station("을지로3가", 1.6)
    line.add_station("강남", 30.0, 37.4979462, 127.0276368)
    return line


@pytest.fixture
def sample_network(sample_line):
    """sample_line 하나만 등록된 노선망"""
    return SubwayNetwork({sample_line.line_id: sample_line})


@pytest.fixture
def sample_csv(tmp_path):
    """테스트용 역간거리 CSV"""
    path = tmp_path / "역간거리.csv"
    path.write_text(
        "연번,철도운영기관명,선명,역명,역간거리\n"
        "1,서울교통공사,1호선,서울역,0\n"
        "2,서울교통공사,1호선,시청,1.1\n"
        "3,서울교통공사,1호선,종각,1.0\n"
        "4,서울교통공사,2호선,시청,0\n"
        "5,서울교통공사,2호선,을지로입구,0.8\n"
        "6,서울교통공사,1호선,종로3가,0.8\n",
        encoding="utf-8-sig",
    )
    return path
