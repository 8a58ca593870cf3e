"""Data contracts for the interest calculation endpoint."""

from datetime import date
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class InterestRequest(BaseModel):
    """Inputs of a HELOC interest estimate.

    Balance and rate accept either numbers or the strings typed into the form
    (``"100,000.00"``); they are parsed by the calculator so that missing and
    malformed values surface as calculator errors rather than schema errors.
    """

    model_config = ConfigDict(extra="forbid")

    balance: Union[float, str, None] = Field(None, description="Outstanding balance, e.g. 100000 or '100,000.00'.")
    annualRate: Union[float, str, None] = Field(None, description="Annual rate in percent, e.g. 6 for 6%.")
    startDate: Optional[date] = Field(None, description="Start (disbursement) date of the cycle.")
    evaluationDate: Optional[date] = Field(
        None,
        description="Date to accrue up to; today when omitted.",
    )
    language: str = "en"

    @field_validator("startDate", "evaluationDate", mode="before")
    @classmethod
    def _blank_date_is_missing(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class FormattedAccruals(BaseModel):
    dailyAccrual: str
    periodAccrual: str
    projectedMonthAccrual: str


class InterestResponse(BaseModel):
    """Accrued interest for one evaluation date."""

    startDate: date
    evaluationDate: date
    cycleEnd: date
    interestCycle: str = "monthly"
    daysElapsed: int = Field(..., ge=0)
    dailyAccrual: float = Field(..., ge=0)
    periodAccrual: float = Field(..., ge=0)
    projectedMonthAccrual: float = Field(..., ge=0)
    formatted: FormattedAccruals


class ErrorResponse(BaseModel):
    error: str
    field: Optional[str] = None
    message: str
