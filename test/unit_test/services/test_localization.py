import pytest

from khet_mitra.services.localization import (
    Translator,
    get_namespace,
    get_nested_value,
    translate,
)


def test_english_strings():
    assert translate("en", "sidebar", "diseaseId") == "Disease ID"
    assert translate("en", "dashboard", "quickActions.newScan") == "New Scan"


def test_hindi_strings():
    assert translate("hi", "sidebar", "dashboard") == "डैशबोर्ड"


def test_missing_key_falls_back_to_english():
    # Marathi only carries part of the chat namespace.
    assert translate("mr", "chat", "title") == "परम-मित्र"
    assert translate("mr", "chat", "inputPlaceholder") == "Ask a farming question..."


@pytest.mark.parametrize("language", ["mr", "ta"])
def test_missing_namespace_falls_back_to_english(language):
    assert get_namespace(language, "dashboard") == get_namespace("en", "dashboard")
    assert translate(language, "dashboard", "quickActions.soilTest") == "Soil Test"


def test_unknown_key_returns_namespaced_key():
    assert translate("hi", "chat", "doesNotExist") == "chat.doesNotExist"
    assert translate("en", "nope", "a.b") == "nope.a.b"


def test_key_pointing_at_a_group_is_not_a_translation():
    assert translate("en", "dashboard", "quickActions") == "dashboard.quickActions"


def test_placeholders_are_replaced():
    assert translate("en", "dashboard", "welcome", name="Ramesh") == "Welcome, Ramesh!"
    assert translate("hi", "dashboard", "welcome", name="रमेश") == "स्वागत है, रमेश!"


def test_unused_options_leave_placeholders():
    assert translate("en", "dashboard", "welcome") == "Welcome, {{name}}!"


def test_get_nested_value():
    data = {"a": {"b": {"c": "x"}}}
    assert get_nested_value(data, "a.b.c") == "x"
    assert get_nested_value(data, "a.x.c") is None


def test_translator_binds_language_and_namespace():
    t = Translator("en", "marketplace")
    assert t("products.barley") == "Barley"
    assert t("perUnit", unit="quintal") == "per quintal"
