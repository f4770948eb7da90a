# 여정(구간 연속) 계산 서비스

import logging
from typing import List, Sequence

from transit_segment.core.exceptions import (
    InsufficientTokensException,
    UnknownLineException,
    UnknownStationException,
)
from transit_segment.models.domain import LegResult
from transit_segment.services.token_parser import parse_station_token
from transit_segment.services.transit_network import SubwayNetwork

logger = logging.getLogger(__name__)

LEG_SEPARATOR = ", "


class JourneyEvaluator:

    def __init__(self, network: SubwayNetwork, min_length: int = 2):
        self.network = network
        self.min_length = min_length

    def evaluate_legs(self, tokens: Sequence[str]) -> List[LegResult]:
        """
        인접한 두 토큰마다 구간 계산

        현재 토큰의 노선 태그가 해당 구간의 노선이 되고, 다음 토큰의 태그는
        그 다음 구간용이므로 여기서는 무시한다. 실패한 구간은 에러로 기록하고 계속 진행.

        Raises:
            InsufficientTokensException: 토큰이 min_length보다 적을 때
        """
        if len(tokens) < self.min_length:
            raise InsufficientTokensException(len(tokens), self.min_length)

        legs: List[LegResult] = []
        for current_token, next_token in zip(tokens, tokens[1:]):
            current = parse_station_token(current_token)
            nxt = parse_station_token(next_token)

            if not current.has_line:
                logger.debug(f"노선 태그 없음: {current_token!r}")

            leg = LegResult(
                start_name=current.name, end_name=nxt.name, line_id=current.line_id
            )
            try:
                leg.segment = self.network.compute_segment(
                    current.name, nxt.name, current.line_id
                )
            except (UnknownLineException, UnknownStationException) as e:
                logger.warning(f"구간 계산 실패: {current_token} -> {next_token}: {e.message}")
                leg.error_code = e.code
                leg.error_message = e.message
            legs.append(leg)

        return legs

    def evaluate(self, tokens: Sequence[str]) -> str:
        """
        예: ["계양역(arex)", "김포공항역(9)", "노량진역"]
            -> "6.6km(7분, 계양역-김포공항역, 직선 5.8km), 18.4km(23분, 김포공항역-노량진역, 직선 13.5km)"
        """
        legs = self.evaluate_legs(tokens)
        return LEG_SEPARATOR.join(leg.describe() for leg in legs)
