from app.config import Settings


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("EXCHANGE_RATES_API_KEY", "abc")
    monkeypatch.setenv("BASE_CURRENCY", "EUR")
    monkeypatch.setenv("ENFORCE_EARLIEST_START", "true")

    settings = Settings(_env_file=None)

    assert settings.exchange_rates_api_key == "abc"
    assert settings.base_currency == "EUR"
    assert settings.enforce_earliest_start is True
    assert settings.suppress_internal_errors is False
    assert settings.log_level == "INFO"
