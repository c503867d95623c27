import logging
from typing import Protocol

import httpx

from app.exceptions.custom import ExchangeRateError, RateLimitError
from app.schemas.exchange_rates import LatestRatesResponse

logger = logging.getLogger(__name__)

LATEST_RATES_URL = "https://api.apilayer.com/exchangerates_data/latest"


class ExchangeRateProvider(Protocol):
    def rate(self, currency_code: str) -> float: ...

    def convert(self, amount: float, currency_code: str) -> float: ...


class ExchangeRateSnapshot:
    """Rates relative to ``base_currency``, fixed for the snapshot's lifetime."""

    def __init__(self, base_currency: str, rates: dict[str, float]):
        self._base_currency = base_currency
        self._rates = dict(rates)

    @property
    def base_currency(self) -> str:
        return self._base_currency

    def __len__(self) -> int:
        return len(self._rates)

    def rate(self, currency_code: str) -> float:
        # Unknown currencies yield 0.0 rather than an error.
        return self._rates.get(currency_code, 0.0)

    def convert(self, amount: float, currency_code: str) -> float:
        if currency_code == self._base_currency:
            return amount
        rate = self.rate(currency_code)
        return amount / rate if rate > 0 else amount


class ExchangeRateService:
    def __init__(
        self,
        client: httpx.AsyncClient,
        api_key: str,
        base_currency: str,
        url: str = LATEST_RATES_URL,
    ):
        self._client = client
        self._headers = {"apikey": api_key}
        self._base_currency = base_currency
        self._url = url

    async def fetch_snapshot(self) -> ExchangeRateSnapshot:
        resp = await self._client.get(
            self._url,
            params={"base": self._base_currency},
            headers=self._headers,
        )

        if resp.status_code == 429:
            raise RateLimitError("Exchange rates")
        if resp.status_code >= 400:
            raise ExchangeRateError(resp.text, status_code=resp.status_code)

        data = LatestRatesResponse(**resp.json())
        if not data.success:
            raise ExchangeRateError("Exchange rates service reported failure", status_code=resp.status_code)

        logger.info(
            "Fetched %d exchange rates for base %s (date=%s)",
            len(data.rates), self._base_currency, data.date,
        )
        return ExchangeRateSnapshot(self._base_currency, data.rates)
