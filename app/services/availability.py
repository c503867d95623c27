import logging
from dataclasses import dataclass

from app.exceptions.custom import BookingFault
from app.mappers.document import RequestDocument
from app.schemas.quotes import Quote
from app.services.exchange_rates import ExchangeRateProvider
from app.services.quotes import QuoteGenerator
from app.services.validation import ValidationPipeline

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuotesResult:
    quotes: list[Quote]


@dataclass(frozen=True)
class FaultResult:
    fault: BookingFault


@dataclass(frozen=True)
class InternalFailureResult:
    error: Exception


AvailabilityResult = QuotesResult | FaultResult | InternalFailureResult


class AvailabilityService:
    """Load, validate and price one availability request."""

    def __init__(
        self,
        pipeline: ValidationPipeline,
        quote_generator: QuoteGenerator,
        rate_provider: ExchangeRateProvider,
    ):
        self._pipeline = pipeline
        self._quote_generator = quote_generator
        self._rate_provider = rate_provider

    def handle(self, xml: str | bytes) -> AvailabilityResult:
        try:
            document = RequestDocument.load(xml)
            request = self._pipeline.validate(document)
            quotes = self._quote_generator.generate(
                request.destinations,
                request.markup,
                request.currency,
                self._rate_provider,
            )
        except BookingFault as fault:
            logger.info("Rejected request (%s): %s", fault.kind, fault.message)
            return FaultResult(fault)
        except Exception as exc:
            logger.exception("Unexpected failure while handling availability request")
            return InternalFailureResult(exc)

        logger.info(
            "Quoted %d destinations for company %s",
            len(quotes), request.credentials.company_id,
        )
        return QuotesResult(quotes)
