"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from loguru import logger
from pydantic import ValidationError

from firecalc.config import AppConfig
from firecalc.core import coast_fire, growth_rate, mortgage, traditional_fire
from firecalc.core.ping import get_ping_message, get_version
from firecalc.domain.validation import InputValidationError
from firecalc.schemas.coast_fire import CoastFireInputs
from firecalc.schemas.growth_rate import GrowthInputs
from firecalc.schemas.mortgage import MortgageInputs
from firecalc.schemas.ping import PingResponse
from firecalc.schemas.traditional_fire import TraditionalFireInputs

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return jsonify({"detail": exc.errors(include_url=False)}), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(InputValidationError)
def _handle_input_error(exc: InputValidationError):
    """Report every out-of-bounds field so the caller can flag them together."""
    logger.info(f"rejected {request.path}: {exc}")
    return jsonify({"error": [error.as_dict() for error in exc.errors]}), HTTPStatus.BAD_REQUEST


def _payload() -> Dict[str, Any]:
    return request.get_json(force=True, silent=False)


def _config() -> AppConfig:
    return current_app.extensions["firecalc_config"]


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message=get_ping_message(), version=get_version())
    return jsonify(response.model_dump())


@api_bp.post("/calc/coast-fire")
def coast_fire_calc() -> Any:
    """Single Coast FIRE result, or three scenarios when range analysis is on."""
    inputs = CoastFireInputs.model_validate(_payload())
    config = _config()
    result = coast_fire.compute(inputs, config.scenario_min_rate, config.scenario_max_rate)
    return jsonify(result.model_dump(mode="json"))


@api_bp.post("/calc/coast-fire/scenarios")
def coast_fire_scenarios() -> Any:
    inputs = CoastFireInputs.model_validate(_payload())
    config = _config()
    result = coast_fire.compute_scenarios(
        inputs, config.scenario_min_rate, config.scenario_max_rate
    )
    return jsonify(result.model_dump(mode="json"))


@api_bp.post("/calc/traditional-fire")
def traditional_fire_calc() -> Any:
    inputs = TraditionalFireInputs.model_validate(_payload())
    result = traditional_fire.compute(inputs, max_years=_config().fire_horizon_years)
    return jsonify(result.model_dump(mode="json"))


@api_bp.post("/calc/mortgage")
def mortgage_calc() -> Any:
    inputs = MortgageInputs.model_validate(_payload())
    return jsonify(mortgage.compute(inputs).model_dump(mode="json"))


@api_bp.post("/calc/growth-rate")
def growth_rate_calc() -> Any:
    inputs = GrowthInputs.model_validate(_payload())
    return jsonify(growth_rate.compute(inputs).model_dump(mode="json"))
