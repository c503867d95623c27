import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, Response

from app.dependencies import AvailabilityDep, RateSnapshotDep, SettingsDep
from app.exceptions.handlers import XML_MEDIA_TYPE
from app.mappers.fault_document import internal_error_document, render_fault_xml
from app.schemas.responses import HealthResponse
from app.services.availability import FaultResult, InternalFailureResult

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/avail")
async def avail(
    request: Request,
    service: AvailabilityDep,
    settings: SettingsDep,
) -> Response:
    body = await request.body()
    result = service.handle(body)

    if isinstance(result, FaultResult):
        raise result.fault

    if isinstance(result, InternalFailureResult):
        if settings.suppress_internal_errors:
            return Response(status_code=200)
        document = internal_error_document()
        return Response(
            content=render_fault_xml(document),
            status_code=document.httpStatusCode,
            media_type=XML_MEDIA_TYPE,
        )

    return JSONResponse(content=[quote.model_dump() for quote in result.quotes])


@router.get("/health", response_model=HealthResponse)
async def health(snapshot: RateSnapshotDep) -> HealthResponse:
    return HealthResponse(status="ok", base_currency=snapshot.base_currency, rates=len(snapshot))
