"""Integration tests for the destination endpoints."""

import pytest
from fastapi.testclient import TestClient

from main import app


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


def test_root(client: TestClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_list_destinations(client: TestClient) -> None:
    response = client.get("/destinations/")

    assert response.status_code == 200
    assert len(response.json()) == 20


def test_filter_by_region_and_category(client: TestClient) -> None:
    response = client.get("/destinations/", params={"region": "Rajasthan", "category": "historical"})

    assert response.status_code == 200
    assert {d["id"] for d in response.json()} == {"jaipur", "udaipur"}


def test_filter_by_category(client: TestClient) -> None:
    response = client.get("/destinations/", params={"category": "wildlife"})

    assert response.status_code == 200
    assert [d["id"] for d in response.json()] == ["ranthambore", "kaziranga"]


def test_regions(client: TestClient) -> None:
    regions = client.get("/destinations/regions").json()

    assert "Rajasthan" in regions
    assert len(regions) == len(set(regions))


def test_get_destination(client: TestClient) -> None:
    response = client.get("/destinations/goa")

    assert response.status_code == 200
    assert response.json()["name"] == "Goa"


def test_unknown_destination_is_404(client: TestClient) -> None:
    response = client.get("/destinations/atlantis")

    assert response.status_code == 404
    assert response.json()["detail"] == "Destination 'atlantis' not found"


def test_recommended(client: TestClient) -> None:
    response = client.get(
        "/destinations/recommended",
        params={"budget": 120000, "days": 10, "persons": 2, "starting_location": "Goa"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["daily_budget_per_person"] == 6000
    assert body["max_destinations"] == 3
    assert len(body["destinations"]) == 3
    assert "goa" not in [r["destination"]["id"] for r in body["destinations"]]
    assert {r["affordability"] for r in body["destinations"]} <= {"budget", "moderate"}


def test_recommended_requires_positive_days(client: TestClient) -> None:
    response = client.get("/destinations/recommended", params={"budget": 50000, "days": 0, "persons": 2})

    assert response.status_code == 422
