from pydantic import BaseModel


class FaultDocument(BaseModel):
    code: int
    type: str
    description: str
    httpStatusCode: int


class HealthResponse(BaseModel):
    status: str
    base_currency: str
    rates: int
