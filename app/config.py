from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    exchange_rates_api_key: str
    exchange_rates_url: str = "https://api.apilayer.com/exchangerates_data/latest"
    base_currency: str = "USD"
    enforce_earliest_start: bool = False
    suppress_internal_errors: bool = False
    http_timeout: float = 30.0
    log_level: str = "INFO"
