"""
REST API 엔드포인트 테스트
"""

import pytest
from fastapi.testclient import TestClient

from transit_segment.api.deps import get_network
from transit_segment.main import app


@pytest.fixture
def client(fallback_network, mocker):
    """FastAPI TestClient fixture (폴백 노선망 주입)"""
    mocker.patch("transit_segment.main.get_transit_network", return_value=fallback_network)
    app.dependency_overrides[get_network] = lambda: fallback_network
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestJourneyEndpoint:
    """여정 계산 엔드포인트 테스트"""

    def test_evaluate_journey(self, client):
        response = client.get(
            "/api/v1/journeys",
            params=[("stops", "계양역(arex)"), ("stops", "김포공항역(9)"), ("stops", "노량진역")],
        )

        assert response.status_code == 200
        data = response.json()
        assert data["summary"] == (
            "6.6km(7분, 계양역-김포공항역, 직선 5.8km), "
            "18.4km(23분, 김포공항역-노량진역, 직선 13.5km)"
        )
        assert len(data["legs"]) == 2
        assert data["legs"][0]["time_minutes"] == 7
        assert data["legs"][1]["straight_distance"] == 13.5

    def test_leg_error(self, client):
        response = client.get(
            "/api/v1/journeys", params=[("stops", "계양역(2)"), ("stops", "노량진역")]
        )

        assert response.status_code == 200
        leg = response.json()["legs"][0]
        assert leg["error_code"] == "UNKNOWN_LINE"
        assert leg["track_distance"] is None
        assert leg["description"] == "Error: 존재하지 않는 노선(2)"

    def test_single_stop(self, client):
        """역 1개 -> 400"""
        response = client.get("/api/v1/journeys", params={"stops": "계양역(arex)"})

        assert response.status_code == 400
        assert response.json()["code"] == "INSUFFICIENT_TOKENS"

    def test_missing_stops(self, client):
        response = client.get("/api/v1/journeys")

        assert response.status_code == 422


class TestLinesEndpoint:
    """노선 조회 엔드포인트 테스트"""

    def test_get_all_lines(self, client):
        response = client.get("/api/v1/lines")

        assert response.status_code == 200
        data = response.json()
        assert data["total_lines"] == 2
        counts = {line["line_id"]: line["station_count"] for line in data["lines"]}
        assert counts == {"arex": 3, "9": 7}

    def test_get_line_stations(self, client):
        response = client.get("/api/v1/lines/arex/stations")

        assert response.status_code == 200
        stations = response.json()["stations"]
        assert stations[1] == {
            "name": "김포공항역",
            "distance": 6.6,
            "lat": 37.562,
            "lng": 126.801,
        }

    def test_unknown_line(self, client):
        response = client.get("/api/v1/lines/99/stations")

        assert response.status_code == 404


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["lines"] == 2
