"""HTTP routes for the Flask API."""

from datetime import date
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, abort, jsonify, request
from pydantic import ValidationError

from heloc.branding import BRANDS
from heloc.core.interest import (
    CalculationInput,
    InterestValidationError,
    calculate,
    format_amount,
)
from heloc.i18n import TRANSLATIONS, translate
from heloc.schemas.interest import (
    ErrorResponse,
    FormattedAccruals,
    InterestRequest,
    InterestResponse,
)

api_bp = Blueprint("api", __name__)


def today() -> date:
    """Calculation date; patched in tests."""
    return date.today()


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return jsonify({"detail": exc.errors(include_url=False)}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.get("/health")
def health() -> Any:
    return jsonify({"status": "ok"})


@api_bp.post("/calc/interest")
def interest() -> Any:
    """Accrued interest between a start date and an evaluation date."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = InterestRequest.model_validate(raw_payload)

    data = CalculationInput(
        balance=payload.balance,
        annual_rate=payload.annualRate,
        start_date=payload.startDate,
        evaluation_date=payload.evaluationDate,
    )
    try:
        result = calculate(data, today=today())
    except InterestValidationError as exc:
        error = ErrorResponse(
            error=exc.code,
            field=exc.field,
            message=translate(payload.language, exc.code),
        )
        return jsonify(error.model_dump()), HTTPStatus.BAD_REQUEST

    response = InterestResponse(
        startDate=result.start_date,
        evaluationDate=result.evaluation_date,
        cycleEnd=result.cycle_end,
        daysElapsed=result.days_elapsed,
        dailyAccrual=round(result.daily_accrual, 2),
        periodAccrual=round(result.period_accrual, 2),
        projectedMonthAccrual=round(result.projected_month_accrual, 2),
        formatted=FormattedAccruals(
            dailyAccrual=format_amount(result.daily_accrual),
            periodAccrual=format_amount(result.period_accrual),
            projectedMonthAccrual=format_amount(result.projected_month_accrual),
        ),
    )
    return jsonify(response.model_dump(mode="json"))


@api_bp.get("/i18n/<language>")
def language_strings(language: str) -> Any:
    """String table the frontend renders its labels from."""
    table = TRANSLATIONS.get(language.lower())
    if table is None:
        abort(HTTPStatus.NOT_FOUND)
    return jsonify(table)


@api_bp.get("/brands")
def brands() -> Any:
    return jsonify([brand.model_dump() for brand in BRANDS.values()])
