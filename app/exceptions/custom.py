from enum import StrEnum

HTTP_BAD_REQUEST = 400
HTTP_GENERIC_ERROR = 500


class FaultKind(StrEnum):
    malformed_document = "MalformedDocument"
    missing_or_invalid_field = "MissingOrInvalidField"
    out_of_range_numeric = "OutOfRangeNumeric"
    non_numeric_field = "NonNumericField"
    destination_count = "DestinationCountViolation"
    date_parse = "DateParseFailure"
    stay_duration = "StayDurationViolation"
    room_composition = "RoomCompositionViolation"
    credentials = "MissingOrInvalidCredentials"
    missing_markup = "MissingMarkup"
    internal = "InternalError"


class BookingFault(Exception):
    """A request that breaks a business rule. Aborts processing."""

    kind: FaultKind = FaultKind.missing_or_invalid_field

    def __init__(
        self,
        message: str,
        code: int = 0,
        http_status: int = HTTP_GENERIC_ERROR,
    ):
        self.message = message
        self.code = code
        self.http_status = http_status
        super().__init__(message)


class MalformedDocumentError(BookingFault):
    kind = FaultKind.malformed_document


class MissingFieldError(BookingFault):
    kind = FaultKind.missing_or_invalid_field


class InvalidFieldError(BookingFault):
    kind = FaultKind.missing_or_invalid_field


class OutOfRangeError(BookingFault):
    kind = FaultKind.out_of_range_numeric


class NonNumericFieldError(BookingFault):
    kind = FaultKind.non_numeric_field


class DestinationCountError(BookingFault):
    kind = FaultKind.destination_count


class DateParseError(BookingFault):
    kind = FaultKind.date_parse

    def __init__(self, message: str):
        super().__init__(message, code=HTTP_BAD_REQUEST, http_status=HTTP_BAD_REQUEST)


class StayDurationError(BookingFault):
    kind = FaultKind.stay_duration


class RoomCompositionError(BookingFault):
    kind = FaultKind.room_composition


class CredentialsError(BookingFault):
    kind = FaultKind.credentials


class MissingMarkupError(BookingFault):
    kind = FaultKind.missing_markup


class ExchangeRateError(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class RateLimitError(Exception):
    def __init__(self, service: str):
        self.service = service
        super().__init__(f"Rate limit exceeded for {service}")
