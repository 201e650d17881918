"""Tests for the scenario and share-link API endpoints."""

import base64
import json

import pytest

from mortgage_planner.models.scenario import default_scenario
from mortgage_planner.services.share_state import encode_state


@pytest.fixture
def scenario_payload():
    """Default scenario as a JSON-ready dict."""
    return default_scenario().model_dump(mode="json")


class TestEvaluateEndpoint:
    """Test cases for POST /api/scenarios/evaluate."""

    def test_evaluate_default_scenario(self, client, scenario_payload):
        """Evaluating the default scenario returns payments and 30 projections."""
        response = client.post("/api/scenarios/evaluate", json=scenario_payload)

        assert response.status_code == 200
        data = json.loads(response.data)
        assert data["payments"]["monthly"] == 790.24
        assert data["rates"]["effective_rate"] == 2.5
        assert len(data["projections"]) == 30
        assert data["risk"] == {"current_ltv": 0.0, "is_pledge_risk": False}
        assert "snapshot" not in data

    def test_years_and_snapshot(self, client, scenario_payload):
        """The horizon and a snapshot year can be requested."""
        response = client.post(
            "/api/scenarios/evaluate?years=15&snapshot_year=20", json=scenario_payload
        )

        assert response.status_code == 200
        data = json.loads(response.data)
        assert len(data["projections"]) == 15
        assert data["snapshot"]["year"] == 15

    def test_negative_years_rejected(self, client, scenario_payload):
        """A negative horizon is a bad request."""
        response = client.post(
            "/api/scenarios/evaluate?years=-1", json=scenario_payload
        )

        assert response.status_code == 400

    def test_years_above_limit_rejected(self, client, scenario_payload):
        """A horizon beyond the configurable maximum is a bad request."""
        response = client.post(
            "/api/scenarios/evaluate?years=10000000", json=scenario_payload
        )

        assert response.status_code == 400
        assert "100" in json.loads(response.data)["error"]

    def test_years_at_limit_accepted(self, client, scenario_payload):
        """The maximum horizon itself is allowed."""
        response = client.post("/api/scenarios/evaluate?years=100", json=scenario_payload)

        assert response.status_code == 200
        assert len(json.loads(response.data)["projections"]) == 100

    def test_invalid_payload(self, client, scenario_payload):
        """Payloads that do not validate return 400 with details."""
        scenario_payload["mortgage"]["type"] = "balloon"

        response = client.post("/api/scenarios/evaluate", json=scenario_payload)

        assert response.status_code == 400
        data = json.loads(response.data)
        assert data["error"] == "Invalid scenario"
        assert data["details"]

    def test_missing_body(self, client):
        """A request without a body is rejected."""
        response = client.post("/api/scenarios/evaluate")

        assert response.status_code == 400

    def test_zero_term(self, client, scenario_payload):
        """A zero-month mortgage term is unprocessable."""
        scenario_payload["mortgage"]["term"] = 0

        response = client.post("/api/scenarios/evaluate", json=scenario_payload)

        assert response.status_code == 422
        assert "periods cannot be zero" in json.loads(response.data)["message"]


class TestAmortizationEndpoint:
    """Test cases for POST /api/scenarios/amortization."""

    def test_schedule(self, client, scenario_payload):
        """The schedule has one entry per month and yearly aggregates."""
        response = client.post("/api/scenarios/amortization", json=scenario_payload)

        assert response.status_code == 200
        data = json.loads(response.data)
        assert len(data["entries"]) == 360
        assert data["payoff_month"] == 360
        assert len(data["yearly"]) == 30
        assert data["entries"][0]["month"] == 1


class TestShareEndpoints:
    """Test cases for the share-link endpoints."""

    def test_default_scenario(self, client, scenario_payload):
        """The default scenario is served as JSON."""
        response = client.get("/api/scenarios/default")

        assert response.status_code == 200
        assert json.loads(response.data) == scenario_payload

    def test_create_share_link(self, client, scenario_payload):
        """Share links carry the encoded scenario."""
        response = client.post("/api/share", json=scenario_payload)

        assert response.status_code == 201
        data = json.loads(response.data)
        assert data["query"] == encode_state(default_scenario())
        assert data["url"].endswith(f"?{data['query']}")
        assert data["url"].startswith("http://localhost")

    def test_resolve_share_link(self, client, scenario_payload):
        """A share query decodes back to the scenario."""
        scenario_payload["pledge"]["amount"] = 75000
        query = json.loads(
            client.post("/api/share", json=scenario_payload).data
        )["query"]

        response = client.get(f"/api/share?{query}")

        assert response.status_code == 200
        assert json.loads(response.data) == scenario_payload

    def test_resolve_deeply_nested_token_returns_defaults(self, client, scenario_payload):
        """A token whose JSON nests past the recursion limit still resolves."""
        payload = ("[" * 100000 + "]" * 100000).encode("ascii")
        token = (
            base64.b64encode(payload)
            .decode("ascii")
            .translate(str.maketrans("+/=", "-_~"))
        )

        response = client.get(f"/api/share?s={token}")

        assert response.status_code == 200
        assert json.loads(response.data) == scenario_payload

    def test_resolve_garbage_returns_defaults(self, client, scenario_payload):
        """Malformed share links resolve to the default scenario."""
        response = client.get("/api/share?s=definitely-not-a-token")

        assert response.status_code == 200
        assert json.loads(response.data) == scenario_payload
