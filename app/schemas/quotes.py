from pydantic import BaseModel, Field


class Price(BaseModel):
    minimumSellingPrice: float
    net: float
    currency: str
    selling_price: float
    selling_currency: str
    markup: float
    exchange_rate: float


class Quote(BaseModel):
    id: str = Field(..., pattern=r"^[A-Z]{2}#[0-9]{2}$")
    hotelCodeSupplier: str
    market: str
    price: Price
