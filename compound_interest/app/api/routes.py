"""HTTP routes for the Flask API."""

import logging
import math
from http import HTTPStatus
from typing import Any, Iterable

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from compound_interest.app.labels import frequency_options, resolve_language
from compound_interest.core.accumulation import calculate_breakdown, calculate_schedule
from compound_interest.core.health import get_health_status
from compound_interest.schemas.accumulation import (
    OUT_OF_RANGE_MESSAGE,
    REQUIRED_FIELDS_MESSAGE,
    CalculationRequest,
    CalculationResponse,
    ScheduleResponse,
)

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.warning("Rejected calculation input: %d error(s)", exc.error_count())
    body = {"error": REQUIRED_FIELDS_MESSAGE, "detail": exc.errors(include_url=False)}
    return jsonify(body), HTTPStatus.UNPROCESSABLE_ENTITY


def _parse_calculation_request():
    raw_payload = request.get_json(force=True, silent=True)
    if not isinstance(raw_payload, dict):
        logger.warning("Rejected calculation request: body is not a JSON object")
        return None
    return CalculationRequest.model_validate(raw_payload)


def _invalid_body_response():
    return jsonify({"error": REQUIRED_FIELDS_MESSAGE}), HTTPStatus.BAD_REQUEST


def _all_finite(values: Iterable[float]) -> bool:
    return all(math.isfinite(value) for value in values)


def _out_of_range_response():
    logger.warning("Rejected calculation: projected value is not finite")
    return jsonify({"error": OUT_OF_RANGE_MESSAGE}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.get("/health")
def health() -> Any:
    """Health-check endpoint."""
    response = get_health_status(current_app.config["SETTINGS"].SERVICE_NAME)
    return jsonify(response.model_dump())


@api_bp.post("/calc/compound")
def compound() -> Any:
    """Project the future value of principal plus contributions."""
    payload = _parse_calculation_request()
    if payload is None:
        return _invalid_body_response()

    breakdown = calculate_breakdown(payload.to_input())
    logger.debug(
        "Computed %s over %d years: %r",
        payload.contribution_frequency.value,
        payload.years,
        breakdown.total_future_value,
    )
    response = CalculationResponse(
        total_future_value=breakdown.total_future_value,
        future_value_of_principal=breakdown.future_value_of_principal,
        future_value_of_contributions=breakdown.future_value_of_contributions,
        total_contributed=breakdown.total_contributed,
        interest_earned=breakdown.interest_earned,
    )
    # JSON has no representation for inf or nan
    if not _all_finite(response.model_dump().values()):
        return _out_of_range_response()
    return jsonify(response.model_dump(mode="json"))


@api_bp.post("/calc/compound/schedule")
def compound_schedule() -> Any:
    """Year-end balances for every year of the projection."""
    payload = _parse_calculation_request()
    if payload is None:
        return _invalid_body_response()

    schedule = calculate_schedule(payload.to_input())
    if not _all_finite(point.balance for point in schedule):
        return _out_of_range_response()
    response = ScheduleResponse(schedule=schedule, final_balance=schedule[-1].balance)
    return jsonify(response.model_dump(mode="json"))


@api_bp.get("/frequencies")
def frequencies() -> Any:
    """Contribution frequency options with labels for the requested language."""
    default_language = current_app.config["DEFAULT_LANGUAGE"]
    lang = resolve_language(request.args.get("lang", default_language), default_language)
    return jsonify([option.model_dump(mode="json") for option in frequency_options(lang)])
