import math
from typing import Tuple


class DistanceCalculator:
    EARTH_RADIUS = 6371.0  # km

    def calculate_distance(
        self, lat1: float, lon1: float, lat2: float, lon2: float
    ) -> float:
        """두 좌표 간 직선 거리 계산(km), 위도가 0.0이면 좌표 없음으로 보고 0.0 반환"""
        # 적도(위도 0) 좌표도 0.0이 되는 알려진 한계
        if lat1 == 0.0 or lat2 == 0.0:
            return 0.0
        return self.haversine((lat1, lon1), (lat2, lon2))

    def haversine(
        self, coord1: Tuple[float, float], coord2: Tuple[float, float]
    ) -> float:
        """하버사인 공식으로 지구의 곡률 고려하여 두 좌표 간 거리 계산"""
        lat1, lon1 = coord1
        lat2, lon2 = coord2

        dlat = math.radians(lat2 - lat1)
        dlon = math.radians(lon2 - lon1)
        a = (
            math.sin(dlat / 2) ** 2
            + math.cos(math.radians(lat1))
            * math.cos(math.radians(lat2))
            * math.sin(dlon / 2) ** 2
        )
        c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
        return self.EARTH_RADIUS * c


_calculator = DistanceCalculator()


def straight_line_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    return _calculator.calculate_distance(lat1, lon1, lat2, lon2)
