import logging
import math
from datetime import date, datetime, timezone

from app.exceptions.custom import (
    DateParseError,
    DestinationCountError,
    InvalidFieldError,
    MissingFieldError,
    MissingMarkupError,
    NonNumericFieldError,
    OutOfRangeError,
    RoomCompositionError,
    StayDurationError,
)
from app.mappers.credentials import extract_credentials
from app.mappers.document import RequestDocument
from app.rules import DEFAULT_RULES, RuleSet
from app.schemas.booking import (
    Destination,
    Passenger,
    Room,
    ValidatedBookingRequest,
)

logger = logging.getLogger(__name__)

_DATE_FORMATS = ("%d/%m/%Y",)


def parse_number(text: str | None) -> float | None:
    """Finite float for numeric text, ``None`` otherwise."""
    if text is None:
        return None
    # float() also takes "1_000" and non-ASCII digits
    if "_" in text or not text.isascii():
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def parse_datetime(text: str) -> datetime:
    """ISO 8601 date or date-time, or DD/MM/YYYY. Aware values become naive UTC."""
    try:
        value = datetime.fromisoformat(text)
    except ValueError:
        for fmt in _DATE_FORMATS:
            try:
                return datetime.strptime(text, fmt)
            except ValueError:
                continue
        raise ValueError(f"unrecognized date '{text}'") from None
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


class ValidationPipeline:
    """Validates an ``AvailRQ`` document field by field.

    Validators run in a fixed order and the first failure raises a
    ``BookingFault``; later validators never run. The order decides which
    single error a caller sees when several fields are wrong.
    """

    def __init__(self, rules: RuleSet = DEFAULT_RULES, today: date | None = None):
        self._rules = rules
        self._today = today

    def validate(self, document: RequestDocument) -> ValidatedBookingRequest:
        rules = self._rules
        language_code = self._enum_value(document, "source/languageCode", rules.languages, "language")
        options_quota = self._numeric_value(
            document,
            "optionsQuota",
            "options quota",
            maximum=rules.options_quota_max,
            default=rules.options_quota_default,
        )
        credentials = extract_credentials(document)
        search_type = self._enum_value(document, "SearchType", rules.search_types, "search type")
        allowed_hotel_count = self._numeric_value(document, "AllowedHotelCount", "allowed hotel count")
        destinations = self._destinations(document, search_type == "Multiple", allowed_hotel_count)

        start_date = self._date_value(document, "StartDate", "Missing start date")
        end_date = self._date_value(document, "EndDate", "Missing end date")
        self._check_stay_length(start_date, end_date)
        if rules.enforce_earliest_start:
            self._check_earliest_start(start_date)

        currency = self._enum_value(document, "Currency", rules.currencies, "currency")
        nationality = self._enum_value(document, "Nationality", rules.nationalities, "nationality")
        market = self._enum_value(document, "Markets/Market", rules.markets, "market")

        max_guests = self._numeric_value(document, "AllowedRoomGuestCount", "allowed guests per room", minimum=1)
        max_children = self._numeric_value(document, "AllowedChildCountPerRoom", "allowed children per room")
        rooms = self._rooms(document, max_guests, max_children)

        markup = self._markup(document)

        logger.debug(
            "Validated request: %d destinations, %d rooms, currency=%s",
            len(destinations), len(rooms), currency,
        )
        return ValidatedBookingRequest(
            language_code=language_code,
            options_quota=options_quota,
            credentials=credentials,
            search_type=search_type,
            allowed_hotel_count=allowed_hotel_count,
            destinations=destinations,
            start_date=start_date,
            end_date=end_date,
            currency=currency,
            nationality=nationality,
            market=market,
            max_guests_per_room=max_guests,
            max_children_per_room=max_children,
            rooms=rooms,
            markup=markup,
        )

    # --- field validators ---

    def _enum_value(
        self,
        document: RequestDocument,
        path: str,
        allowed: tuple[str, ...],
        field: str,
    ) -> str:
        # Absent or blank falls back silently; present but unknown is rejected.
        value = document.text(path)
        if not value:
            return allowed[0]
        if value not in allowed:
            raise InvalidFieldError(f"Invalid {field} value: '{value}'")
        return value

    def _numeric_value(
        self,
        document: RequestDocument,
        path: str,
        field: str,
        minimum: int | None = None,
        maximum: int | None = None,
        default: int | None = None,
    ) -> int:
        text = document.text(path)
        if text is None:
            if default is not None:
                return default
            raise MissingFieldError(f"Missing '{field}'")
        return self._bounded_int(text, field, minimum, maximum)

    def _bounded_int(
        self,
        text: str | None,
        field: str,
        minimum: int | None = None,
        maximum: int | None = None,
    ) -> int:
        number = parse_number(text)
        if number is None:
            raise NonNumericFieldError(f"'{field}' must be a number")

        value = int(number)
        if minimum is not None and value < minimum:
            raise OutOfRangeError(f"Minimum '{field}' value must be greater than {minimum}")
        if maximum is not None and value > maximum:
            raise OutOfRangeError(f"Maximum '{field}' value must be less than {maximum}")
        return value

    def _destinations(
        self,
        document: RequestDocument,
        search_multiple: bool,
        allowed_hotel_count: int,
    ) -> tuple[Destination, ...]:
        nodes = document.query("AvailDestinations/Destination")
        if not nodes:
            raise DestinationCountError("Missing required destinations")
        if not search_multiple and len(nodes) > 1:
            raise DestinationCountError("Single search cannot request multiple destinations")
        if len(nodes) > allowed_hotel_count:
            raise DestinationCountError(
                f"Number of requested destinations exceed the allowed hotels count: {allowed_hotel_count}"
            )

        destinations = []
        for node in nodes:
            code = (node.get("code") or "").strip()
            if not code:
                raise MissingFieldError("Destination code is missing or empty")
            destinations.append(Destination(code=code))
        return tuple(destinations)

    def _date_value(self, document: RequestDocument, path: str, missing_message: str) -> datetime:
        text = document.text(path)
        if text is None:
            raise MissingFieldError(missing_message)
        try:
            return parse_datetime(text)
        except ValueError as exc:
            raise DateParseError(f"Error parsing date: {exc}") from exc

    def _check_stay_length(self, start_date: datetime, end_date: datetime) -> None:
        days = abs(end_date - start_date).days
        if days < self._rules.min_stay_days:
            raise StayDurationError(
                "Stay (difference between start and end dates) must be at least "
                f"{self._rules.min_stay_days} days, got {days}"
            )

    def _check_earliest_start(self, start_date: datetime) -> None:
        today = self._today or date.today()
        if (start_date.date() - today).days < self._rules.earliest_start_days:
            raise StayDurationError(
                f"Start date should be at least {self._rules.earliest_start_days} days "
                f"from now, got {start_date.date().isoformat()}"
            )

    def _rooms(self, document: RequestDocument, max_guests: int, max_children: int) -> tuple[Room, ...]:
        room_nodes = document.query("Paxes")
        if not room_nodes:
            raise RoomCompositionError("Missing rooms")

        rooms = []
        for room_node in room_nodes:
            guest_nodes = document.query("Pax", context=room_node)
            if not guest_nodes:
                raise RoomCompositionError("Missing guests per room")
            if len(guest_nodes) > max_guests:
                raise RoomCompositionError("Number of passengers per room exceeded")

            passengers = []
            for guest_node in guest_nodes:
                age_text = guest_node.get("age")
                age_number = parse_number(age_text)
                if age_number is not None and not age_number.is_integer():
                    raise NonNumericFieldError("'passenger age' must be a whole number")
                age = self._bounded_int(age_text, "passenger age", minimum=0)
                passengers.append(Passenger(age=age, is_child=age <= self._rules.max_child_age))
            room = Room(passengers=tuple(passengers))

            if room.children > max_children:
                raise RoomCompositionError("Number of children per room exceeded")
            if room.children > 0 and room.adults == 0:
                raise RoomCompositionError("Children not accompanied by adults not allowed")
            rooms.append(room)

        return tuple(rooms)

    def _markup(self, document: RequestDocument) -> float:
        text = document.text("Markup")
        if text is None:
            raise MissingMarkupError("Missing markup")
        markup = parse_number(text)
        if markup is None:
            raise MissingMarkupError("Markup must be a number")
        return markup
