import logging
from collections.abc import Sequence

from app.rules import DEFAULT_RULES, RuleSet
from app.schemas.booking import Destination
from app.schemas.quotes import Price, Quote
from app.services.exchange_rates import ExchangeRateProvider
from app.services.synthetic import SyntheticDataGenerator

logger = logging.getLogger(__name__)


class QuoteGenerator:
    def __init__(self, rules: RuleSet = DEFAULT_RULES, data: SyntheticDataGenerator | None = None):
        self._rules = rules
        self._data = data or SyntheticDataGenerator()

    def generate(
        self,
        destinations: Sequence[Destination],
        markup: float,
        target_currency: str,
        rate_provider: ExchangeRateProvider,
    ) -> list[Quote]:
        """One synthetic quote per destination, in request order.

        The market is drawn once from the allowed markets and shared by every
        quote of the response; the request's own market is not consulted.
        """
        market = self._data.choice(self._rules.markets)
        quotes = [
            Quote(
                id=self._data.option_id(),
                hotelCodeSupplier=destination.code,
                market=market,
                price=self._price(markup, target_currency, rate_provider),
            )
            for destination in destinations
        ]
        logger.debug("Generated %d quotes (market=%s, currency=%s)", len(quotes), market, target_currency)
        return quotes

    def _price(self, markup: float, target_currency: str, rate_provider: ExchangeRateProvider) -> Price:
        net = self._data.random_float()
        currency = self._data.choice(self._rules.currencies)
        selling_price = net * (1 + markup / 100)

        if currency != target_currency:
            selling_price = rate_provider.convert(selling_price, target_currency)

        return Price(
            minimumSellingPrice=self._rules.discount * selling_price,
            net=net,
            currency=currency,
            selling_price=selling_price,
            selling_currency=target_currency,
            markup=markup,
            exchange_rate=rate_provider.rate(target_currency),
        )
