"""
Tests for the REST endpoints.
"""

import pytest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from fastapi.testclient import TestClient

from travelverse.main import app

client = TestClient(app)

PREFIX = "/api/v1"

PROFILE = {
    "interests": ["culture", "photography"],
    "budgetRange": "moderate",
    "travelStyle": "cultural",
    "personality": {"adventurous": 0.3, "cultural": 0.9},
}


def destination(id, traditions=(), photo_spots=0, cost_max=150):
    return {
        "id": id,
        "name": id.title(),
        "country": "Testland",
        "coordinates": {"lat": 10.0, "lng": 20.0},
        "activities": ["Walking tours"],
        "culture": {"traditions": list(traditions)},
        "history": "Old town",
        "travelInfo": {"averageCostRange": [50, cost_max]},
        "photoSpotCount": photo_spots,
    }


DESTINATIONS = [
    destination("plain", cost_max=400),
    destination("kyoto", traditions=["Tea ceremony"], photo_spots=6),
    destination("agra", photo_spots=3),
    destination("lisbon"),
]


class TestHealth:
    def test_health(self):
        response = client.get(f"{PREFIX}/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "swarm_optimizer" in data["components"]


class TestRecommendations:
    """Tests for POST /recommendations."""

    def test_ranked_response(self):
        response = client.post(f"{PREFIX}/recommendations", json={
            "profile": PROFILE, "destinations": DESTINATIONS, "seed": "trip-1",
        })
        assert response.status_code == 200

        data = response.json()
        assert data["success"] is True
        assert data["recommendations"][0]["id"] == "kyoto"
        assert "personalityMatch" in data
        assert data["insights"]["trendingDestinations"][0] == "Kyoto"
        assert data["metadata"]["candidates_evaluated"] == 4

        scores = [r["score"] for r in data["recommendations"]]
        assert scores == sorted(scores, reverse=True)
        for item in data["recommendations"]:
            assert 0.0 <= item["score"] <= 1.0
            assert 0.0 <= item["confidence"] <= 1.0
            assert item["justification"]

    def test_items_carry_full_destination_record(self):
        kyoto = dict(
            destination("kyoto", traditions=["Tea ceremony"], photo_spots=6),
            accommodation=[{"name": "Ryokan", "type": "Luxury Ryokan", "rating": 4.8}],
        )
        response = client.post(f"{PREFIX}/recommendations", json={
            "profile": PROFILE, "destinations": [kyoto], "seed": "trip-1",
        })
        assert response.status_code == 200

        item = response.json()["recommendations"][0]
        assert set(item) == {
            "id", "name", "country", "coordinates", "activities", "culture",
            "history", "travelInfo", "accommodation", "photoSpotCount",
            "score", "justification", "confidence",
        }
        assert item["activities"] == ["Walking tours"]
        assert item["culture"]["traditions"] == ["Tea ceremony"]
        assert item["history"] == "Old town"
        assert item["travelInfo"]["averageCostRange"] == [50, 150]
        assert item["accommodation"][0]["type"] == "Luxury Ryokan"
        assert item["photoSpotCount"] == 6

    def test_unknown_personality_trait(self):
        profile = dict(PROFILE, personality={"grumpy": 0.5})
        response = client.post(f"{PREFIX}/recommendations", json={
            "profile": profile, "destinations": DESTINATIONS,
        })
        assert response.status_code == 422

    def test_seeded_requests_identical(self):
        body = {"profile": PROFILE, "destinations": DESTINATIONS, "seed": "same"}
        first = client.post(f"{PREFIX}/recommendations", json=body).json()
        second = client.post(f"{PREFIX}/recommendations", json=body).json()
        assert first["recommendations"] == second["recommendations"]

    def test_top_k(self):
        response = client.post(f"{PREFIX}/recommendations", json={
            "profile": PROFILE, "destinations": DESTINATIONS, "topK": 2,
        })
        assert response.status_code == 200
        assert len(response.json()["recommendations"]) == 2

    def test_empty_candidates(self):
        response = client.post(f"{PREFIX}/recommendations", json={
            "profile": PROFILE, "destinations": [],
        })
        assert response.status_code == 422
        assert response.json()["error"] == "EmptyCandidateSet"

    def test_invalid_budget_range(self):
        profile = dict(PROFILE, budgetRange="cheap")
        response = client.post(f"{PREFIX}/recommendations", json={
            "profile": profile, "destinations": DESTINATIONS,
        })
        assert response.status_code == 422


class TestPhotoGuides:
    """Tests for POST /photo-guides/score."""

    def test_sorted_by_viral_potential(self):
        guides = [
            {"id": "g1", "destinationId": "d", "category": "food", "difficulty": "expert"},
            {"id": "g2", "destinationId": "d", "category": "sunset",
             "difficulty": "easy", "imageCount": 5},
        ]
        response = client.post(f"{PREFIX}/photo-guides/score", json={"guides": guides})
        assert response.status_code == 200

        data = response.json()
        assert [g["id"] for g in data["guides"]] == ["g2", "g1"]
        assert data["guides"][0]["viralPotential"] == 1.0
        assert data["guides"][1]["viralPotential"] == 0.5

    def test_unknown_category(self):
        guides = [{"id": "g1", "destinationId": "d", "category": "selfie", "difficulty": "easy"}]
        response = client.post(f"{PREFIX}/photo-guides/score", json={"guides": guides})
        assert response.status_code == 422


class TestSwarm:
    """Tests for POST /swarm/photo-spots."""

    def test_seeded_run_reproducible(self):
        body = {
            "destinationId": "taj-mahal",
            "participants": [{"lat": 27.1738, "lng": 78.0421}, {"lat": 27.1745, "lng": 78.043}],
            "iterations": 10,
            "seed": "group-7",
        }
        first = client.post(f"{PREFIX}/swarm/photo-spots", json=body)
        second = client.post(f"{PREFIX}/swarm/photo-spots", json=body)
        assert first.status_code == 200
        assert first.json() == second.json()

        data = first.json()
        assert data["destinationId"] == "taj-mahal"
        assert data["participantCount"] == 2
        assert data["iterations"] == 10
        assert len(data["alternatives"]) == 3

    def test_pole_near_antimeridian(self):
        response = client.post(f"{PREFIX}/swarm/photo-spots", json={
            "destinationId": "north-pole",
            "participants": [{"lat": 90.0, "lng": 179.9999}],
            "iterations": 1,
            "seed": "polar",
        })
        assert response.status_code == 200

        data = response.json()
        positions = [data["bestPosition"]] + [a["position"] for a in data["alternatives"]]
        for position in positions:
            assert -90.0 <= position["lat"] <= 90.0
            assert -180.0 <= position["lng"] < 180.0

    def test_no_participants(self):
        response = client.post(f"{PREFIX}/swarm/photo-spots", json={
            "destinationId": "taj-mahal", "participants": [],
        })
        assert response.status_code == 422
        assert response.json()["error"] == "NoParticipants"

    def test_iterations_bounded(self):
        response = client.post(f"{PREFIX}/swarm/photo-spots", json={
            "destinationId": "taj-mahal",
            "participants": [{"lat": 27.1738, "lng": 78.0421}],
            "iterations": 0,
        })
        assert response.status_code == 422


class TestEngagement:
    """Tests for POST /interactions/engagement."""

    def test_long_share(self):
        response = client.post(f"{PREFIX}/interactions/engagement", json={
            "action": "share", "duration": 45,
        })
        assert response.status_code == 200
        assert response.json()["engagementScore"] == pytest.approx(6.0)

    def test_unknown_action(self):
        response = client.post(f"{PREFIX}/interactions/engagement", json={"action": "teleport"})
        assert response.status_code == 422


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
