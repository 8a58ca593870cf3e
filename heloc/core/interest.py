"""HELOC interest accrual over a single monthly cycle.

Interest = Balance x (Rate / 100) / 365 x Number of days

An evaluation date must fall inside the accrual cycle that opens on the
start date, i.e. within ``[start, start + 1 month - 1 day]``.
"""

from __future__ import annotations

import math
from calendar import monthrange
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional, Union

from heloc.logging_config import get_logger

logger = get_logger("heloc.core.interest")

DAYS_IN_YEAR = 365
PROJECTION_DAYS = 30

Amount = Union[str, float, int, None]


class InterestValidationError(ValueError):
    """Raised when calculator input is rejected.

    ``code`` is stable and doubles as the translation key of the message.
    """

    def __init__(self, code: str, field: Optional[str] = None):
        super().__init__(code if field is None else f"{field}: {code}")
        self.code = code
        self.field = field


@dataclass(frozen=True)
class CalculationInput:
    balance: Amount = None
    annual_rate: Amount = None
    start_date: Optional[date] = None
    evaluation_date: Optional[date] = None


@dataclass(frozen=True)
class ValidatedInput:
    balance: float
    annual_rate: float
    start_date: date
    evaluation_date: date


@dataclass(frozen=True)
class CalculationResult:
    start_date: date
    evaluation_date: date
    cycle_end: date
    days_elapsed: int
    daily_accrual: float
    period_accrual: float
    projected_month_accrual: float


def add_months(day: date, months: int) -> date:
    """Shift ``day`` by whole calendar months, clamping to the month's end."""
    index = day.month - 1 + months
    year = day.year + index // 12
    month = index % 12 + 1
    return date(year, month, min(day.day, monthrange(year, month)[1]))


def cycle_end(start: date) -> date:
    """Last day (inclusive) of the accrual cycle opened on ``start``."""
    return add_months(start, 1) - timedelta(days=1)


def parse_amount(value: Amount) -> Optional[float]:
    """Parse a comma-formatted amount; ``None`` if it is not a usable number."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        cleaned = value.replace(",", "").replace("$", "").replace(" ", "")
        try:
            number = float(cleaned)
        except ValueError:
            return None
    else:
        number = float(value)
    if math.isnan(number) or math.isinf(number) or number < 0:
        return None
    return number


def parse_date(value: Union[str, date, None], field: str = "date") -> Optional[date]:
    if value is None or isinstance(value, date):
        return value
    value = value.strip()
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise InterestValidationError("invalid_date", field) from None


def format_amount(value: float) -> str:
    return f"{value:,.2f}"


def _is_blank(value: Amount) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def validate(data: CalculationInput, today: Optional[date] = None) -> ValidatedInput:
    """Check ``data`` and return its parsed form.

    The first failing rule wins:
      1) balance, rate and start date are required
      2) the start date cannot be after today
      3) the evaluation date (today when omitted) cannot precede the start
      4) the evaluation date cannot pass the end of the accrual cycle
      5) balance and rate must be non-negative numbers
      6) their accrual must be representable (no overflow to infinity)
    """
    today = today or date.today()

    if _is_blank(data.balance) or _is_blank(data.annual_rate) or data.start_date is None:
        raise InterestValidationError("missing_fields")

    start = data.start_date
    if start > today:
        raise InterestValidationError("start_in_future", "start_date")

    evaluation = data.evaluation_date or today
    if evaluation < start:
        raise InterestValidationError("evaluation_before_start", "evaluation_date")
    if evaluation > cycle_end(start):
        raise InterestValidationError("evaluation_after_cycle", "evaluation_date")

    balance = parse_amount(data.balance)
    if balance is None:
        raise InterestValidationError("invalid_balance", "balance")
    rate = parse_amount(data.annual_rate)
    if rate is None:
        raise InterestValidationError("invalid_rate", "annual_rate")
    if not math.isfinite(balance * rate / 100 / DAYS_IN_YEAR * PROJECTION_DAYS):
        raise InterestValidationError("amount_too_large", "balance")

    return ValidatedInput(
        balance=balance,
        annual_rate=rate,
        start_date=start,
        evaluation_date=evaluation,
    )


def compute(data: ValidatedInput) -> CalculationResult:
    daily_rate = data.annual_rate / 100 / DAYS_IN_YEAR
    days_elapsed = (data.evaluation_date - data.start_date).days
    daily_accrual = data.balance * daily_rate

    return CalculationResult(
        start_date=data.start_date,
        evaluation_date=data.evaluation_date,
        cycle_end=cycle_end(data.start_date),
        days_elapsed=days_elapsed,
        daily_accrual=daily_accrual,
        period_accrual=daily_accrual * days_elapsed,
        projected_month_accrual=daily_accrual * PROJECTION_DAYS,
    )


def calculate(data: CalculationInput, today: Optional[date] = None) -> CalculationResult:
    """Validate then compute, logging the outcome."""
    try:
        validated = validate(data, today)
    except InterestValidationError as exc:
        logger.info("calculation rejected", extra={"action": "calculate", "code": exc.code})
        raise

    result = compute(validated)
    logger.info(
        "calculation completed",
        extra={"action": "calculate", "days_elapsed": result.days_elapsed},
    )
    return result
