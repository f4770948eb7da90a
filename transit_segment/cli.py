"""
명령행 실행

사용법:
    transit-segment 계양역(arex) 김포공항역(9) 노량진역
    python -m transit_segment 계양역(arex) 김포공항역(9) 노량진역 --data 역간거리.csv
    transit-segment --data 역간거리.csv -- 계양역(arex) 노량진역
"""

import sys
import logging
import argparse
from typing import List, Optional

from transit_segment.core.config import settings
from transit_segment.core.exceptions import InsufficientTokensException
from transit_segment.services.journey_service import JourneyEvaluator
from transit_segment.services.transit_network import SubwayNetwork

USAGE = (
    "Usage: transit-segment <Start(line)> <Transfer(line)> ... <End>\n"
    "Ex: transit-segment 계양역(arex) 김포공항역(9) 노량진역"
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="transit-segment",
        description="구간별 선로 거리, 직선 거리, 예상 소요시간 계산",
        add_help=True,
    )
    parser.add_argument("stops", nargs="*", help="역 토큰 (예: 계양역(arex))")
    parser.add_argument(
        "--data", default=None, help="역간거리 CSV 경로 (기본값: STATION_DATA_PATH)"
    )
    parser.add_argument(
        "--fallback", default=None, help="폴백 노선 JSON 경로 (기본값: FALLBACK_DATA_PATH)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="디버그 로그 출력")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    # 옵션이 역 토큰 사이에 있어도 허용, "-"로 시작하는 역은 "--" 뒤에 입력
    args = build_parser().parse_intermixed_args(argv)

    # 로깅 설정 (stderr)
    logging.basicConfig(
        level=logging.DEBUG if (args.verbose or settings.DEBUG) else settings.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # 1. 입력 검증
    if len(args.stops) < 2:
        print(USAGE)
        return 1

    # 2. 데이터 로드
    network = SubwayNetwork()
    network.load(args.data, args.fallback)

    # 3. 구간 계산 및 결과 출력
    try:
        result = JourneyEvaluator(network).evaluate(args.stops)
    except InsufficientTokensException:
        print(USAGE)
        return 1

    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
