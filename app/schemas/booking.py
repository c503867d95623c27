from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Credentials(BaseModel):
    model_config = ConfigDict(frozen=True)

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    company_id: int = Field(..., gt=0)


class Destination(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str  # supplier hotel code, opaque


class Passenger(BaseModel):
    model_config = ConfigDict(frozen=True)

    age: int = Field(..., ge=0)
    is_child: bool = False


class Room(BaseModel):
    model_config = ConfigDict(frozen=True)

    passengers: tuple[Passenger, ...] = Field(..., min_length=1)

    @property
    def children(self) -> int:
        return sum(1 for p in self.passengers if p.is_child)

    @property
    def adults(self) -> int:
        return len(self.passengers) - self.children


class ValidatedBookingRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    language_code: str
    options_quota: int
    credentials: Credentials
    search_type: str  # "Single" | "Multiple"
    allowed_hotel_count: int
    destinations: tuple[Destination, ...]
    start_date: datetime
    end_date: datetime
    currency: str
    nationality: str
    market: str
    max_guests_per_room: int
    max_children_per_room: int
    rooms: tuple[Room, ...]
    markup: float
