from typing import Annotated

from fastapi import Depends, Request

from app.config import Settings
from app.services.availability import AvailabilityService
from app.services.exchange_rates import ExchangeRateSnapshot


def get_availability_service(request: Request) -> AvailabilityService:
    return request.app.state.availability_service


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_rate_snapshot(request: Request) -> ExchangeRateSnapshot:
    return request.app.state.rate_snapshot


AvailabilityDep = Annotated[AvailabilityService, Depends(get_availability_service)]
SettingsDep = Annotated[Settings, Depends(get_settings)]
RateSnapshotDep = Annotated[ExchangeRateSnapshot, Depends(get_rate_snapshot)]
