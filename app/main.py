import logging
import sys
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from app.config import Settings
from app.exceptions.custom import BookingFault
from app.exceptions.handlers import booking_fault_handler
from app.routers.availability import router as availability_router
from app.rules import RuleSet
from app.services.availability import AvailabilityService
from app.services.exchange_rates import ExchangeRateService
from app.services.quotes import QuoteGenerator
from app.services.synthetic import SyntheticDataGenerator
from app.services.validation import ValidationPipeline

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    # Rates are fetched once; a failure here aborts startup.
    async with httpx.AsyncClient(timeout=settings.http_timeout) as client:
        exchange = ExchangeRateService(
            client,
            settings.exchange_rates_api_key,
            settings.base_currency,
            url=settings.exchange_rates_url,
        )
        snapshot = await exchange.fetch_snapshot()

    rules = RuleSet(enforce_earliest_start=settings.enforce_earliest_start)

    app.state.settings = settings
    app.state.rate_snapshot = snapshot
    app.state.availability_service = AvailabilityService(
        ValidationPipeline(rules),
        QuoteGenerator(rules, SyntheticDataGenerator()),
        snapshot,
    )
    logger.info("Availability service ready (base currency %s)", snapshot.base_currency)

    yield


app = FastAPI(title="Avail Quotes", lifespan=lifespan)

app.add_exception_handler(BookingFault, booking_fault_handler)

app.include_router(availability_router)
