import logging
import xml.etree.ElementTree as ET
from unittest.mock import patch

from app.services.quotes import QuoteGenerator

XML_HEADERS = {"content-type": "application/xml"}


async def test_avail_success(client, avail_xml):
    resp = await client.post("/avail", content=avail_xml(), headers=XML_HEADERS)

    assert resp.status_code == 200
    data = resp.json()
    assert len(data) == 1
    quote = data[0]
    assert quote["hotelCodeSupplier"] == "HTL1"
    assert quote["market"] in ("ES", "US", "GB", "CA")
    assert set(quote["price"]) == {
        "minimumSellingPrice",
        "net",
        "currency",
        "selling_price",
        "selling_currency",
        "markup",
        "exchange_rate",
    }
    assert quote["price"]["selling_currency"] == "USD"
    assert quote["price"]["markup"] == 10.0
    assert quote["price"]["exchange_rate"] == 1.0


async def test_avail_fault_document(client, avail_xml):
    resp = await client.post(
        "/avail",
        content=avail_xml(destinations=("HTL1", "HTL2"), allowed_hotel_count="2"),
        headers=XML_HEADERS,
    )

    assert resp.status_code == 500
    assert resp.headers["content-type"].startswith("application/xml")
    root = ET.fromstring(resp.text)
    assert root.tag == "applicationErrors"
    assert root.findtext("code") == "0"
    assert root.findtext("type") == "DestinationCountViolation"
    assert root.findtext("description") == "Single search cannot request multiple destinations"
    assert root.findtext("httpStatusCode") == "500"


async def test_avail_date_fault_is_400(client, avail_xml):
    resp = await client.post("/avail", content=avail_xml(start_date="32/13/2026"), headers=XML_HEADERS)

    assert resp.status_code == 400
    root = ET.fromstring(resp.text)
    assert root.findtext("type") == "DateParseFailure"
    assert root.findtext("httpStatusCode") == "400"


async def test_avail_malformed_body(client):
    resp = await client.post("/avail", content="not xml at all", headers=XML_HEADERS)

    assert resp.status_code == 500
    assert ET.fromstring(resp.text).findtext("type") == "MalformedDocument"


async def test_avail_internal_error_default(client, avail_xml):
    with patch.object(QuoteGenerator, "generate", side_effect=RuntimeError("boom")):
        resp = await client.post("/avail", content=avail_xml(), headers=XML_HEADERS)

    assert resp.status_code == 500
    root = ET.fromstring(resp.text)
    assert root.findtext("type") == "InternalError"
    assert "boom" not in resp.text


async def test_avail_internal_error_suppressed(client, avail_xml):
    from app.main import app

    # lifespan rebuilds app.state for every test
    app.state.settings = app.state.settings.model_copy(update={"suppress_internal_errors": True})
    with patch.object(QuoteGenerator, "generate", side_effect=RuntimeError("boom")):
        resp = await client.post("/avail", content=avail_xml(), headers=XML_HEADERS)

    assert resp.status_code == 200
    assert resp.content == b""


async def test_health(client):
    resp = await client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "base_currency": "USD", "rates": 3}


async def test_avail_fault_logged_once(client, avail_xml, caplog):
    caplog.set_level(logging.INFO)

    resp = await client.post("/avail", content=avail_xml(rooms=((4, 3),), allowed_children="2"), headers=XML_HEADERS)

    assert resp.status_code == 500
    records = [r for r in caplog.records if "Children not accompanied" in r.getMessage()]
    assert len(records) == 1
    assert records[0].levelno == logging.INFO
