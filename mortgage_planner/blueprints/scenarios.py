"""
Scenario blueprint for home purchase evaluations.

This module exposes the scenario service and the share-link codec as JSON
endpoints: evaluating a scenario, building its amortization schedule, and
encoding/decoding share tokens.
"""

from typing import Any

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from mortgage_planner.models.mortgage_amortization import yearly_totals
from mortgage_planner.models.payment import InvalidPeriodError
from mortgage_planner.models.projection import MAX_PROJECTION_YEARS
from mortgage_planner.models.scenario import ScenarioInput, default_scenario
from mortgage_planner.services.scenario_service import ScenarioService
from mortgage_planner.services.share_state import (
    decode_state,
    encode_state,
    share_url,
)

scenarios_bp = Blueprint("scenarios", __name__, url_prefix="/api")


def _parse_scenario() -> ScenarioInput:
    return ScenarioInput.model_validate(request.get_json(silent=True) or {})


@scenarios_bp.route("/scenarios/default", methods=["GET"])
def get_default_scenario() -> Any:
    """Return the initial scenario.

    Returns:
        JSON response with the default ScenarioInput
    """
    return jsonify(default_scenario().model_dump(mode="json")), 200


@scenarios_bp.route("/scenarios/evaluate", methods=["POST"])
def evaluate_scenario() -> Any:
    """Evaluate payments, projections and risk for a scenario.

    Query params:
        years: Projection horizon, 0..MAX_PROJECTION_YEARS (defaults to PROJECTION_YEARS)
        snapshot_year: Optional year whose projection is returned as ``snapshot``

    Returns:
        JSON response with the ScenarioResult
    """
    try:
        scenario = _parse_scenario()

        years = request.args.get(
            "years", current_app.config["PROJECTION_YEARS"], type=int
        )
        if not 0 <= years <= MAX_PROJECTION_YEARS:
            return (
                jsonify(
                    {"error": f"years must be between 0 and {MAX_PROJECTION_YEARS}"}
                ),
                400,
            )

        service = ScenarioService(projection_years=years)
        result = service.evaluate(scenario)

        response_data = result.model_dump(mode="json")

        snapshot_year = request.args.get("snapshot_year", type=int)
        if snapshot_year is not None and result.projections:
            response_data["snapshot"] = result.projection_for_year(
                snapshot_year
            ).model_dump(mode="json")

        return jsonify(response_data), 200

    except ValidationError as e:
        return jsonify({"error": "Invalid scenario", "details": e.errors()}), 400
    except InvalidPeriodError as e:
        return jsonify({"error": "Invalid mortgage term", "message": str(e)}), 422
    except Exception as e:
        current_app.logger.error(f"Error evaluating scenario: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500


@scenarios_bp.route("/scenarios/amortization", methods=["POST"])
def get_amortization_schedule() -> Any:
    """Build the monthly amortization schedule for a scenario.

    Returns:
        JSON response with schedule entries, totals and yearly aggregates
    """
    try:
        scenario = _parse_scenario()

        summary = ScenarioService().amortization(scenario)

        response_data = summary.model_dump(mode="json")
        response_data["yearly"] = [
            year.model_dump(mode="json") for year in yearly_totals(summary.entries)
        ]
        return jsonify(response_data), 200

    except ValidationError as e:
        return jsonify({"error": "Invalid scenario", "details": e.errors()}), 400
    except InvalidPeriodError as e:
        return jsonify({"error": "Invalid mortgage term", "message": str(e)}), 422
    except Exception as e:
        current_app.logger.error(f"Error building amortization schedule: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500


@scenarios_bp.route("/share", methods=["POST"])
def create_share_link() -> Any:
    """Encode a scenario into a share query and URL.

    Returns:
        JSON response with ``query`` and ``url``
    """
    try:
        scenario = _parse_scenario()
        base_url = current_app.config["SHARE_BASE_URL"] or request.host_url.rstrip("/")

        return (
            jsonify(
                {
                    "query": encode_state(scenario),
                    "url": share_url(scenario, base_url),
                }
            ),
            201,
        )

    except ValidationError as e:
        return jsonify({"error": "Invalid scenario", "details": e.errors()}), 400
    except Exception as e:
        current_app.logger.error(f"Error creating share link: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500


@scenarios_bp.route("/share", methods=["GET"])
def resolve_share_link() -> Any:
    """Decode the current query string into a scenario.

    Malformed links resolve to the default scenario.

    Returns:
        JSON response with the decoded ScenarioInput
    """
    query = request.query_string.decode("utf-8")
    scenario = decode_state(query, default_scenario())
    return jsonify(scenario.model_dump(mode="json")), 200
