"""
DistanceCalculator 테스트
"""

import pytest
from transit_segment.algorithms.distance_calculator import (
    DistanceCalculator,
    straight_line_distance,
)


class TestDistanceCalculator:
    """DistanceCalculator 테스트 클래스"""

    @pytest.fixture
    def calculator(self):
        """DistanceCalculator 인스턴스"""
        return DistanceCalculator()

    def test_calculate_distance_same_point(self, calculator):
        """동일한 지점 간 거리 계산 (0이어야 함)"""
        lat, lon = 37.5546788, 126.9706188  # 서울역

        distance = calculator.calculate_distance(lat, lon, lat, lon)

        assert distance == 0.0

    def test_calculate_distance_known_locations(self, calculator):
        """알려진 위치 간 거리 계산 (km 단위)"""
        # 서울역 (37.5546788, 126.9706188)
        # 강남역 (37.4979462, 127.0276368)
        seoul_lat, seoul_lon = 37.5546788, 126.9706188
        gangnam_lat, gangnam_lon = 37.4979462, 127.0276368

        distance = calculator.calculate_distance(
            seoul_lat, seoul_lon, gangnam_lat, gangnam_lon
        )

        # 대략 8.0km (±500m 오차 허용)
        assert 7.5 < distance < 8.5

    def test_calculate_distance_long_distance(self, calculator):
        """서울-부산 약 325km"""
        distance = calculator.calculate_distance(
            37.5546788, 126.9706188, 35.1796, 129.0756
        )

        assert 320 < distance < 330

    def test_distance_symmetry(self, calculator):
        """거리 계산의 대칭성 테스트 (A→B == B→A)"""
        lat1, lon1 = 37.571, 126.736  # 계양
        lat2, lon2 = 37.514, 126.942  # 노량진

        distance1 = calculator.calculate_distance(lat1, lon1, lat2, lon2)
        distance2 = calculator.calculate_distance(lat2, lon2, lat1, lon1)

        assert distance1 == pytest.approx(distance2, abs=1e-12)

    def test_north_south_distance(self, calculator):
        """위도 1도 ≈ 111km"""
        distance = calculator.calculate_distance(37.0, 127.0, 38.0, 127.0)

        assert 110 < distance < 112

    @pytest.mark.parametrize(
        "lat1, lon1, lat2, lon2",
        [
            (0.0, 126.736, 37.514, 126.942),
            (37.571, 126.736, 0.0, 126.942),
            (0.0, 0.0, 0.0, 0.0),
            (0.0, 10.0, 0.0, 11.0),  # 적도 좌표도 좌표 없음으로 취급됨
        ],
    )
    def test_zero_latitude_means_unknown(self, calculator, lat1, lon1, lat2, lon2):
        """위도가 0.0이면 좌표 없음으로 보고 0.0 반환"""
        assert calculator.calculate_distance(lat1, lon1, lat2, lon2) == 0.0

    def test_nonzero_for_distinct_points(self, calculator):
        """서로 다른 지점이면 0보다 큼"""
        assert calculator.calculate_distance(37.5, 127.0, 37.5, 127.0001) > 0

    def test_module_function_matches_calculator(self, calculator):
        """straight_line_distance 함수와 클래스 결과 동일"""
        args = (37.562, 126.801, 37.514, 126.942)

        assert straight_line_distance(*args) == calculator.calculate_distance(*args)
