import logging

from bakecalc.config import Settings, load_settings


def test_defaults_from_empty_environment():
    assert load_settings({}) == Settings(locale="nb", default_grams=100.0, log_level="WARNING")


def test_reads_overrides():
    settings = load_settings(
        {"BAKECALC_LOCALE": "en_GB", "BAKECALC_DEFAULT_GRAMS": "250", "BAKECALC_LOG_LEVEL": "debug"}
    )
    assert settings == Settings(locale="en", default_grams=250.0, log_level="DEBUG")


def test_bad_values_fall_back(caplog):
    with caplog.at_level(logging.WARNING, logger="bakecalc.config"):
        settings = load_settings({"BAKECALC_LOCALE": "fr", "BAKECALC_DEFAULT_GRAMS": "lots"})
    assert settings.locale == "nb"
    assert settings.default_grams == 100.0
    assert "BAKECALC_LOCALE" in caplog.text
    assert "BAKECALC_DEFAULT_GRAMS" in caplog.text


def test_negative_default_grams_clamped():
    assert load_settings({"BAKECALC_DEFAULT_GRAMS": "-5"}).default_grams == 0.0


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("BAKECALC_LOCALE", "en")
    assert load_settings().locale == "en"
