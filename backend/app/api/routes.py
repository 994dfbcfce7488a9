"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, Response, current_app, jsonify, request
from pydantic import ValidationError

from backend.core.breakdown import summarize_schedule
from backend.core.catalog import (
    DEFAULT_PARAMS,
    QUICK_SCENARIOS,
    classify_risk,
    get_investment_type,
    list_investment_types,
)
from backend.core.comparison import compare_scenarios, compare_without_contributions
from backend.core.export import EXPORT_FILENAME, schedule_to_csv
from backend.core.ping import build_ping
from backend.core.projection import calculate_investment
from backend.schemas.catalog import InvestmentType, InvestmentTypeView
from backend.schemas.comparison import QuickScenariosResponse, ScenarioComparisonRequest
from backend.schemas.simulation import SimulationParams, SimulationResponse

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


class UnknownInvestmentType(LookupError):
    def __init__(self, type_id: str):
        super().__init__(f"unknown investment type '{type_id}'")
        self.type_id = type_id


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.warning("rejected payload errors=%d path=%s", exc.error_count(), request.path)
    detail = exc.errors(include_url=False, include_context=False)
    return jsonify({"detail": detail}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(UnknownInvestmentType)
def _handle_unknown_type(exc: UnknownInvestmentType):
    logger.warning("unknown investment type id=%s", exc.type_id)
    return jsonify({"detail": str(exc)}), HTTPStatus.UNPROCESSABLE_ENTITY


def _view(entry: InvestmentType) -> Dict[str, Any]:
    view = InvestmentTypeView(**entry.model_dump(), riskIndicator=classify_risk(entry.risk))
    return view.model_dump(mode="json")


def _simulation_params(raw_payload: Any) -> SimulationParams:
    """
    Validate a request body into SimulationParams.

    When interestRate is missing but investmentType names a catalog entry,
    the entry's average rate is filled in before validation.
    """
    if isinstance(raw_payload, dict) and raw_payload.get("interestRate") is None:
        type_id = raw_payload.get("investmentType")
        if isinstance(type_id, str) and type_id:
            entry = get_investment_type(type_id)
            if entry is None:
                raise UnknownInvestmentType(type_id)
            raw_payload = {**raw_payload, "interestRate": entry.averageRate}
    return SimulationParams.model_validate(raw_payload)


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = build_ping(current_app.config["SETTINGS"].env)
    return jsonify(response.model_dump())


@api_bp.get("/investment-types")
def investment_types() -> Any:
    return jsonify([_view(entry) for entry in list_investment_types()])


@api_bp.get("/investment-types/<type_id>")
def investment_type(type_id: str) -> Any:
    entry = get_investment_type(type_id)
    if entry is None:
        return jsonify({"detail": f"investment type '{type_id}' not found"}), HTTPStatus.NOT_FOUND
    return jsonify(_view(entry))


@api_bp.get("/quick-scenarios")
def quick_scenarios() -> Any:
    response = QuickScenariosResponse(defaults=DEFAULT_PARAMS, scenarios=list(QUICK_SCENARIOS))
    return jsonify(response.model_dump(mode="json"))


@api_bp.post("/simulations")
def simulate() -> Any:
    """Project the monthly schedule and its summary figures."""
    params = _simulation_params(request.get_json(force=True, silent=False))
    results = calculate_investment(params)
    logger.info(
        "simulation periods=%d rate=%s final=%.2f",
        results.periods,
        params.interestRate,
        results.finalAmount,
    )
    response = SimulationResponse(results=results, summary=summarize_schedule(results))
    return jsonify(response.model_dump(mode="json"))


@api_bp.post("/simulations/export")
def export_simulation() -> Response:
    params = _simulation_params(request.get_json(force=True, silent=False))
    results = calculate_investment(params)
    logger.info("csv export periods=%d", results.periods)
    return Response(
        schedule_to_csv(results),
        mimetype="text/csv",
        headers={"Content-Disposition": f"attachment; filename={EXPORT_FILENAME}"},
    )


@api_bp.post("/simulations/compare")
def compare_simulation() -> Any:
    """Compare the scenario against the same one with no monthly contributions."""
    params = _simulation_params(request.get_json(force=True, silent=False))
    comparison = compare_without_contributions(params)
    return jsonify(comparison.model_dump(mode="json"))


@api_bp.post("/scenarios/compare")
def compare_named_scenarios() -> Any:
    payload = ScenarioComparisonRequest.model_validate(request.get_json(force=True, silent=False))
    outcomes = compare_scenarios(payload.scenarios)
    logger.info("compared scenarios count=%d", len(outcomes))
    return jsonify([outcome.model_dump(mode="json") for outcome in outcomes])
