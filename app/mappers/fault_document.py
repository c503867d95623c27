import xml.etree.ElementTree as ET

from app.exceptions.custom import HTTP_GENERIC_ERROR, BookingFault, FaultKind
from app.schemas.responses import FaultDocument

INTERNAL_ERROR_MESSAGE = "Internal error while processing the request"


def fault_to_document(fault: BookingFault) -> FaultDocument:
    return FaultDocument(
        code=fault.code,
        type=str(fault.kind),
        description=fault.message,
        httpStatusCode=fault.http_status,
    )


def internal_error_document() -> FaultDocument:
    return FaultDocument(
        code=0,
        type=str(FaultKind.internal),
        description=INTERNAL_ERROR_MESSAGE,
        httpStatusCode=HTTP_GENERIC_ERROR,
    )


def render_fault_xml(document: FaultDocument) -> str:
    """Serialize as ``<applicationErrors>`` with one child per field."""
    root = ET.Element("applicationErrors")
    for name, value in document.model_dump().items():
        ET.SubElement(root, name).text = str(value)
    return ET.tostring(root, encoding="unicode")
