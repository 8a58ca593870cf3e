"""English and French string tables for the calculator."""

from __future__ import annotations

from typing import Dict

DEFAULT_LANGUAGE = "en"

TRANSLATIONS: Dict[str, Dict[str, str]] = {
    "en": {
        "title": "HELOC Interest Calculator",
        "description": (
            "A Home Equity Line of Credit (HELOC) allows homeowners to borrow against the "
            "equity in their home. Interest is calculated daily on the borrowed amount and "
            "typically paid monthly. Use this calculator to estimate the interest accrued "
            "over a period."
        ),
        "formulaHeading": "Formula:",
        "formula": "Interest = Balance × (Rate / 100) ÷ 365 × Number of days",
        "exampleHeading": "Example:",
        "example": "$100,000.00 × (6 ÷ 100) ÷ 365 × 10 days = $164.38 accrued interest",
        "balance": "Balance ($)",
        "rate": "Interest Rate (%)",
        "startDate": "Start Date",
        "evaluationDate": "Custom Date",
        "today": "Today",
        "calculate": "Calculate",
        "clear": "Clear",
        "switchLang": "Français",
        "switchBrand": "Switch brand",
        "fillFields": "*Please fill in all fields to calculate accrued interest.*",
        "todayAutoCalc": (
            "Clicking 'Today' will set the custom date to today and automatically "
            "calculate the interest."
        ),
        "interestCycle": "Interest cycle: Monthly",
        "daysAccrued": "Days accrued:",
        "interestAccrued": "Interest accrued:",
        "estimatedInterest": "Estimated full month interest:",
        "subjectChange": "Subject to change",
        # validation messages, keyed by InterestValidationError.code
        "missing_fields": "Please fill in all fields to calculate accrued interest.",
        "start_in_future": "Start date cannot be after today.",
        "evaluation_before_start": "Custom date cannot be before the start date.",
        "evaluation_after_cycle": (
            "Selected date cannot be after one full calendar month from the start date."
        ),
        "invalid_balance": "Balance must be a number greater than or equal to zero.",
        "invalid_rate": "Interest rate must be a number greater than or equal to zero.",
        "invalid_date": "Dates must use the YYYY-MM-DD format.",
        "amount_too_large": "Balance and interest rate are too large to calculate interest.",
    },
    "fr": {
        "title": "Calculateur d'intérêt pour marge de crédit hypothécaire (HELOC)",
        "description": (
            "Une marge de crédit hypothécaire (HELOC) permet aux propriétaires d'emprunter "
            "sur la valeur nette de leur maison. Les intérêts sont calculés quotidiennement "
            "sur le montant emprunté et sont généralement payés mensuellement. Utilisez ce "
            "calculateur pour estimer les intérêts courus sur une période donnée."
        ),
        "formulaHeading": "Formule :",
        "formula": "Intérêt = Solde × (Taux / 100) ÷ 365 × Nombre de jours",
        "exampleHeading": "Exemple :",
        "example": "$100,000.00 × (6 ÷ 100) ÷ 365 × 10 jours = $164.38 d'intérêts courus",
        "balance": "Solde ($)",
        "rate": "Taux d'intérêt (%)",
        "startDate": "Date de début",
        "evaluationDate": "Date personnalisée",
        "today": "Aujourd'hui",
        "calculate": "Calculer",
        "clear": "Réinitialiser",
        "switchLang": "English",
        "switchBrand": "Changer de marque",
        "fillFields": "*Veuillez remplir tous les champs pour calculer les intérêts courus.*",
        "todayAutoCalc": (
            "En cliquant sur 'Aujourd'hui', la date personnalisée sera définie sur "
            "aujourd'hui et le calcul des intérêts sera effectué automatiquement."
        ),
        "interestCycle": "Cycle d'intérêt : Mensuel",
        "daysAccrued": "Jours accumulés :",
        "interestAccrued": "Intérêts courus :",
        "estimatedInterest": "Intérêts mensuels estimés :",
        "subjectChange": "Susceptible de changer",
        "missing_fields": "Veuillez remplir tous les champs pour calculer les intérêts courus.",
        "start_in_future": "La date de début ne peut pas être ultérieure à aujourd'hui.",
        "evaluation_before_start": (
            "La date personnalisée ne peut pas être antérieure à la date de début."
        ),
        "evaluation_after_cycle": (
            "La date sélectionnée ne peut pas dépasser un mois civil complet à partir "
            "de la date de début."
        ),
        "invalid_balance": "Le solde doit être un nombre supérieur ou égal à zéro.",
        "invalid_rate": "Le taux d'intérêt doit être un nombre supérieur ou égal à zéro.",
        "invalid_date": "Les dates doivent utiliser le format AAAA-MM-JJ.",
        "amount_too_large": "Le solde et le taux d'intérêt sont trop élevés pour calculer les intérêts.",
    },
}


def normalize_language(language: str | None) -> str:
    """Return a supported language code, falling back to English."""
    if language and language.lower() in TRANSLATIONS:
        return language.lower()
    return DEFAULT_LANGUAGE


def other_language(language: str) -> str:
    return "fr" if normalize_language(language) == "en" else "en"


def translate(language: str | None, key: str) -> str:
    table = TRANSLATIONS[normalize_language(language)]
    return table.get(key, TRANSLATIONS[DEFAULT_LANGUAGE].get(key, key))


def strings(language: str | None) -> Dict[str, str]:
    return dict(TRANSLATIONS[normalize_language(language)])
