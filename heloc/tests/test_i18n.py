from heloc.i18n import TRANSLATIONS, normalize_language, other_language, translate


def test_languages_share_the_same_keys():
    assert set(TRANSLATIONS["en"]) == set(TRANSLATIONS["fr"])


def test_every_error_code_has_a_message():
    codes = [
        "missing_fields",
        "start_in_future",
        "evaluation_before_start",
        "evaluation_after_cycle",
        "invalid_balance",
        "invalid_rate",
        "invalid_date",
        "amount_too_large",
    ]
    for language in TRANSLATIONS:
        for code in codes:
            assert translate(language, code) != code


def test_unknown_language_falls_back_to_english():
    assert normalize_language("de") == "en"
    assert normalize_language(None) == "en"
    assert translate("de", "clear") == "Clear"


def test_toggle_alternates():
    assert other_language("en") == "fr"
    assert other_language("fr") == "en"
    assert other_language("xx") == "fr"
