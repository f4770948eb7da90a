"""
직선 거리 계산 알고리즘
"""

from transit_segment.algorithms.distance_calculator import (
    DistanceCalculator,
    straight_line_distance,
)

__all__ = [
    "DistanceCalculator",
    "straight_line_distance",
]
