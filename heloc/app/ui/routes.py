"""Server-rendered calculator page."""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional

from flask import Blueprint, current_app, render_template_string, request

from heloc.app.ui.page import HTML_TEMPLATE
from heloc.branding import get_brand, next_brand
from heloc.core.interest import (
    CalculationInput,
    CalculationResult,
    InterestValidationError,
    calculate,
    format_amount,
    parse_amount,
    parse_date,
)
from heloc.i18n import normalize_language, other_language, strings, translate

ui_bp = Blueprint("ui", __name__)

FIELDS = ("balance", "rate", "start_date", "evaluation_date")
ACTIONS = ("calculate", "today", "clear", "toggle_language", "toggle_brand")


def today() -> date:
    """Calculation date; patched in tests."""
    return date.today()


def empty_form() -> Dict[str, str]:
    return {name: "" for name in FIELDS}


def read_form(form: Any) -> Dict[str, str]:
    """Pull the calculator fields out of the submitted form."""
    return {name: (form.get(name) or "").strip() for name in FIELDS}


def is_complete(fields: Dict[str, str]) -> bool:
    return bool(fields["balance"] and fields["rate"] and fields["start_date"])


def run_calculation(fields: Dict[str, str], on: date) -> CalculationResult:
    # missing fields outrank a malformed date
    if not is_complete(fields):
        raise InterestValidationError("missing_fields")
    data = CalculationInput(
        balance=fields["balance"],
        annual_rate=fields["rate"],
        start_date=parse_date(fields["start_date"], "start_date"),
        evaluation_date=parse_date(fields["evaluation_date"], "evaluation_date"),
    )
    return calculate(data, today=on)


def render_page(
    fields: Dict[str, str],
    lang: str,
    brand_key: Optional[str],
    result: Optional[CalculationResult] = None,
    error: Optional[str] = None,
) -> str:
    on = today()
    return render_template_string(
        HTML_TEMPLATE,
        t=strings(lang),
        lang=lang,
        brand=get_brand(brand_key),
        form=fields,
        complete=is_complete(fields),
        result=result,
        error=error,
        money=format_amount,
        today=on.isoformat(),
        year=on.year,
    )


@ui_bp.route("/", methods=["GET", "POST"])
def calculator() -> str:
    settings = current_app.config["HELOC_SETTINGS"]
    source = request.form if request.method == "POST" else request.args
    lang = normalize_language(source.get("lang") or settings.default_language)
    brand_key = source.get("brand") or settings.default_brand

    if request.method == "GET":
        return render_page(empty_form(), lang, brand_key)

    fields = read_form(request.form)
    action = request.form.get("action", "calculate")
    if action not in ACTIONS:
        action = "calculate"

    if action == "clear":
        return render_page(empty_form(), lang, brand_key)
    if action == "toggle_language":
        return render_page(fields, other_language(lang), brand_key)
    if action == "toggle_brand":
        return render_page(fields, lang, next_brand(brand_key))

    if action == "today":
        fields["evaluation_date"] = today().isoformat()

    try:
        result = run_calculation(fields, today())
    except InterestValidationError as exc:
        # rejected dates are cleared so they can be picked again
        if exc.field == "evaluation_date" and action == "calculate":
            fields["evaluation_date"] = ""
        elif exc.field == "start_date" and exc.code == "start_in_future":
            fields["start_date"] = ""
        return render_page(fields, lang, brand_key, error=translate(lang, exc.code))

    fields["balance"] = format_amount(parse_amount(fields["balance"]))
    return render_page(fields, lang, brand_key, result=result)
