from fastapi import Request
from fastapi.responses import Response

from app.exceptions.custom import BookingFault
from app.mappers.fault_document import fault_to_document, render_fault_xml

XML_MEDIA_TYPE = "application/xml"


async def booking_fault_handler(_request: Request, exc: BookingFault) -> Response:
    return Response(
        content=render_fault_xml(fault_to_document(exc)),
        status_code=exc.http_status,
        media_type=XML_MEDIA_TYPE,
    )
