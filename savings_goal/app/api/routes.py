"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from savings_goal.core.rate_solver import solve_rate_detailed
from savings_goal.core.schedule import build_schedule
from savings_goal.domain.ledger import LedgerValidationError
from savings_goal.domain.plan import evaluate_plan
from savings_goal.schemas.health import HealthResponse
from savings_goal.schemas.plan import (
    PlanInputs,
    PlanRequest,
    PlanResponse,
    ScheduleRequest,
    ScheduleResponse,
)

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)

_INPUT_FIELDS = tuple(PlanInputs.model_fields)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return (
        jsonify({"detail": exc.errors(include_url=False, include_context=False)}),
        HTTPStatus.UNPROCESSABLE_ENTITY,
    )


@api_bp.errorhandler(LedgerValidationError)
def _handle_ledger_error(exc: LedgerValidationError):
    return jsonify({"error": exc.errors}), HTTPStatus.BAD_REQUEST


def _plan_inputs(model: PlanInputs) -> PlanInputs:
    """Strip request-only fields so the core sees plain plan inputs."""
    return PlanInputs(**model.model_dump(include=set(_INPUT_FIELDS)))


@api_bp.get("/health")
def health() -> Any:
    """Health-check endpoint."""
    settings = current_app.config["SETTINGS"]
    response = HealthResponse(status="ok", service=settings.app_name)
    return jsonify(response.model_dump())


@api_bp.post("/calc/rate")
def rate() -> Any:
    """Solve the periodic rate that reaches the target."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    inputs = PlanInputs.model_validate(raw_payload)
    solution = solve_rate_detailed(inputs)
    logger.info("Solved rate %.6f (solved=%s) for %d periods", solution.rate, solution.solved, inputs.periods)
    return jsonify(solution.model_dump())


@api_bp.post("/calc/schedule")
def schedule() -> Any:
    """Expand a given (or freshly solved) rate into the per-period schedule."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = ScheduleRequest.model_validate(raw_payload)
    inputs = _plan_inputs(payload)
    periodic_rate = payload.rate if payload.rate is not None else solve_rate_detailed(inputs).rate
    response = ScheduleResponse(rate=periodic_rate, schedule=build_schedule(inputs, periodic_rate))
    return jsonify(response.model_dump())


@api_bp.post("/calc/plan")
def plan() -> Any:
    """Full evaluation: rate, summary, schedule and paid flags."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = PlanRequest.model_validate(raw_payload)
    evaluation = evaluate_plan(_plan_inputs(payload), paid=payload.paid)
    response = PlanResponse(
        summary=evaluation.summary,
        schedule=evaluation.ledger_rows(),
        paid_total=evaluation.paid_total,
        pending_total=evaluation.pending_total,
    )
    return jsonify(response.model_dump())
