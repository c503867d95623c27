from pydantic import BaseModel


class LatestRatesResponse(BaseModel):
    success: bool = True
    base: str | None = None
    date: str | None = None
    rates: dict[str, float] = {}
