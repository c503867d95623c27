import httpx
import pytest
import respx
from httpx import ASGITransport, Response

RATES_URL = "https://api.apilayer.com/exchangerates_data/latest"

RATES = {"USD": 1.0, "EUR": 0.92, "GBP": 0.79}


def build_avail_xml(
    language="en",
    options_quota="20",
    parameter='<Parameter password="secret" username="partner" CompanyID="123456"/>',
    search_type="Single",
    allowed_hotel_count="1",
    destinations=("HTL1",),
    start_date="2026-11-20",
    end_date="2026-11-25",
    currency="USD",
    nationality="US",
    market="ES",
    allowed_room_guests="2",
    allowed_children="1",
    rooms=((30,),),
    markup="10",
):
    """Build an AvailRQ document; pass ``None`` to leave a field out."""

    def node(tag, value):
        return "" if value is None else f"<{tag}>{value}</{tag}>"

    parts = ["<AvailRQ>"]
    if language is not None:
        parts.append(f"<source>{node('languageCode', language)}</source>")
    parts.append(node("optionsQuota", options_quota))
    if parameter is not None:
        parts.append(f"<Configuration><Parameters>{parameter}</Parameters></Configuration>")
    parts.append(node("SearchType", search_type))
    parts.append(node("AllowedHotelCount", allowed_hotel_count))
    if destinations is not None:
        parts.append("<AvailDestinations>")
        parts.extend(f'<Destination code="{code}"/>' for code in destinations)
        parts.append("</AvailDestinations>")
    parts.append(node("StartDate", start_date))
    parts.append(node("EndDate", end_date))
    parts.append(node("Currency", currency))
    parts.append(node("Nationality", nationality))
    if market is not None:
        parts.append(f"<Markets>{node('Market', market)}</Markets>")
    parts.append(node("AllowedRoomGuestCount", allowed_room_guests))
    parts.append(node("AllowedChildCountPerRoom", allowed_children))
    for ages in rooms or ():
        pax = "".join(f'<Pax age="{age}"/>' for age in ages)
        parts.append(f"<Paxes>{pax}</Paxes>")
    parts.append(node("Markup", markup))
    parts.append("</AvailRQ>")
    return "".join(parts)


@pytest.fixture
def avail_xml():
    return build_avail_xml


@pytest.fixture
def mock_env(monkeypatch):
    monkeypatch.setenv("EXCHANGE_RATES_API_KEY", "test-key")
    monkeypatch.setenv("BASE_CURRENCY", "USD")


@pytest.fixture
async def client(mock_env):
    from app.main import app, lifespan

    with respx.mock:
        respx.get(RATES_URL).mock(
            return_value=Response(
                200,
                json={"success": True, "base": "USD", "date": "2026-10-19", "rates": RATES},
            )
        )
        async with lifespan(app):
            async with httpx.AsyncClient(
                transport=ASGITransport(app=app),
                base_url="http://test",
            ) as c:
                yield c
