from fastapi import Depends

from transit_segment.services.journey_service import JourneyEvaluator
from transit_segment.services.transit_network import SubwayNetwork, get_transit_network


def get_network() -> SubwayNetwork:
    return get_transit_network()


def get_journey_evaluator(
    network: SubwayNetwork = Depends(get_network),
) -> JourneyEvaluator:
    return JourneyEvaluator(network)
