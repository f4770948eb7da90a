"""
여정 구간 계산 REST API 엔드포인트
"""

from fastapi import APIRouter, Depends, Query
from typing import List
import logging

from transit_segment.api.deps import get_journey_evaluator
from transit_segment.models.responses import JourneyResponse, LegResponse
from transit_segment.services.journey_service import LEG_SEPARATOR, JourneyEvaluator

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("", response_model=JourneyResponse)
async def evaluate_journey(
    stops: List[str] = Query(..., description="역 토큰 (예: 계양역(arex))"),
    evaluator: JourneyEvaluator = Depends(get_journey_evaluator),
):
    """
    구간별 거리/소요시간 계산

    - **stops**: 순서대로 나열한 역 토큰 (2개 이상)

    Example:
        GET /api/v1/journeys?stops=계양역(arex)&stops=김포공항역(9)&stops=노량진역
    """
    logger.info(f"여정 계산: stops={stops}")
    # 역이 2개 미만이면 InsufficientTokensException -> 400 (전역 핸들러)
    legs = evaluator.evaluate_legs(stops)

    leg_responses = []
    for leg in legs:
        segment = leg.segment
        leg_responses.append(
            LegResponse(
                start_name=leg.start_name,
                end_name=leg.end_name,
                line_id=leg.line_id,
                description=leg.describe(),
                track_distance=round(segment.track_distance, 1) if segment else None,
                straight_distance=(
                    round(segment.straight_distance, 1)
                    if segment and segment.straight_distance > 0
                    else None
                ),
                time_minutes=segment.time_minutes if segment else None,
                error_code=leg.error_code,
            )
        )

    return JourneyResponse(
        stops=stops,
        summary=LEG_SEPARATOR.join(leg.description for leg in leg_responses),
        legs=leg_responses,
    )
