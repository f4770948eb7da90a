"""
Business logic services
"""

from transit_segment.services.transit_network import SubwayNetwork, get_transit_network
from transit_segment.services.journey_service import JourneyEvaluator

__all__ = [
    "SubwayNetwork",
    "get_transit_network",
    "JourneyEvaluator",
]
