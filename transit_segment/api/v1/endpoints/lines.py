"""
노선 조회 REST API 엔드포인트
"""

from fastapi import APIRouter, Depends, HTTPException

from transit_segment.api.deps import get_network
from transit_segment.core.exceptions import UnknownLineException
from transit_segment.services.transit_network import SubwayNetwork
from transit_segment.models.responses import LineListResponse, LineSummary

router = APIRouter()


@router.get("", response_model=LineListResponse)
async def get_all_lines(network: SubwayNetwork = Depends(get_network)):
    """전체 노선 목록 조회"""
    summaries = [
        LineSummary(
            line_id=line.line_id,
            average_speed=line.average_speed,
            station_count=len(line.stations),
        )
        for line in network.lines.values()
    ]
    return LineListResponse(lines=summaries, total_lines=len(summaries))


@router.get("/{line_id}/stations")
async def get_line_stations(line_id: str, network: SubwayNetwork = Depends(get_network)):
    """
    노선의 역 목록 (누적 거리 순서)

    Returns:
        {"line_id": "arex", "stations": [{"name": "계양역", "distance": 0.0, ...}, ...]}
    """
    try:
        line = network.get_line(line_id)
    except UnknownLineException as e:
        raise HTTPException(status_code=404, detail=e.message)

    return {
        "line_id": line.line_id,
        "stations": [
            {
                "name": s.name,
                "distance": s.distance_from_start,
                "lat": s.lat,
                "lng": s.lng,
            }
            for s in line.stations
        ],
    }
