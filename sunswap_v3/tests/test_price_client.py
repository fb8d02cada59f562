"""
Price client tests

HTTP is served by httpx.MockTransport; no network access.
"""

from decimal import Decimal

import httpx
import pytest

from ..data.price_client import PriceClient, PriceClientConfig, PriceClientError, PriceQuote

SUN = "TSSMHYeV2uE9qYH95DqyoCuNCzEL1NvU3S"
API = "https://open.sun.io/apiv2/price"


def price_payload(address=SUN, price="0.0215", currency="USD", last_updated=1700000000000):
    return {
        "code": 0,
        "data": {address: {"quote": {currency: {"price": price, "last_updated": last_updated}}}},
    }


def make_client(handler, max_retries=3):
    config = PriceClientConfig(base_url=API, timeout=1.0, max_retries=max_retries, retry_delay=0)
    return PriceClient(config, transport=httpx.MockTransport(handler))


class TestGetTokenPrice:
    """PriceClient.get_token_price"""

    def test_success(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json=price_payload())

        with make_client(handler) as client:
            quote = client.get_token_price(SUN)

        assert quote == PriceQuote(address=SUN, currency="USD", price=Decimal("0.0215"), last_updated=1700000000000)
        assert seen[0].url.params["tokenAddress"] == SUN
        assert str(seen[0].url).startswith(API)

    def test_currency_is_uppercased(self):
        handler = lambda request: httpx.Response(200, json=price_payload(currency="CNY"))
        with make_client(handler) as client:
            assert client.get_token_price(SUN, "cny").currency == "CNY"

    def test_missing_timestamp(self):
        handler = lambda request: httpx.Response(200, json=price_payload(last_updated=None))
        with make_client(handler) as client:
            assert client.get_token_price(SUN).last_updated is None

    def test_api_error_code(self):
        handler = lambda request: httpx.Response(200, json={"code": 500, "msg": "bad token"})
        with make_client(handler) as client:
            with pytest.raises(PriceClientError, match="bad token"):
                client.get_token_price(SUN)

    def test_missing_data(self):
        handler = lambda request: httpx.Response(200, json={"code": 0, "data": {}})
        with make_client(handler) as client:
            with pytest.raises(PriceClientError, match="No price data"):
                client.get_token_price(SUN)

    def test_missing_quote(self):
        handler = lambda request: httpx.Response(200, json=price_payload(currency="EUR"))
        with make_client(handler) as client:
            with pytest.raises(PriceClientError, match="No USD quote"):
                client.get_token_price(SUN)

    @pytest.mark.parametrize("price", ["0", "-1", "abc", None, "NaN"])
    def test_invalid_price(self, price):
        handler = lambda request: httpx.Response(200, json=price_payload(price=price))
        with make_client(handler) as client:
            with pytest.raises(PriceClientError, match="Invalid price"):
                client.get_token_price(SUN)

    def test_invalid_json(self):
        handler = lambda request: httpx.Response(200, content=b"<html>")
        with make_client(handler) as client:
            with pytest.raises(PriceClientError, match="Invalid JSON"):
                client.get_token_price(SUN)

    @pytest.mark.parametrize("body", [
        [1, 2],
        {"code": 0, "data": {SUN: "oops"}},
        {"code": 0, "data": {SUN: {"quote": ["USD"]}}},
        {"code": 0, "data": {SUN: {"quote": {"USD": 0.02}}}},
    ])
    def test_malformed_response(self, body):
        handler = lambda request: httpx.Response(200, json=body)
        with make_client(handler) as client:
            with pytest.raises(PriceClientError, match="Malformed price response"):
                client.get_token_price(SUN)

    def test_invalid_timestamp(self):
        handler = lambda request: httpx.Response(200, json=price_payload(last_updated="soon"))
        with make_client(handler) as client:
            with pytest.raises(PriceClientError, match="Invalid timestamp"):
                client.get_token_price(SUN)


class TestRetries:
    """Retry behaviour"""

    def test_server_error_is_retried(self):
        calls = []

        def handler(request):
            calls.append(request)
            if len(calls) < 3:
                return httpx.Response(503)
            return httpx.Response(200, json=price_payload())

        with make_client(handler) as client:
            assert client.get_token_price(SUN).price == Decimal("0.0215")
        assert len(calls) == 3

    def test_client_error_is_not_retried(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(404)

        with make_client(handler) as client:
            with pytest.raises(PriceClientError, match="404"):
                client.get_token_price(SUN)
        assert len(calls) == 1

    def test_timeout_exhausts_retries(self):
        calls = []

        def handler(request):
            calls.append(request)
            raise httpx.ConnectTimeout("timed out", request=request)

        with make_client(handler, max_retries=2) as client:
            with pytest.raises(PriceClientError, match="timed out"):
                client.get_token_price(SUN)
        assert len(calls) == 2

    def test_network_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with make_client(handler, max_retries=1) as client:
            with pytest.raises(PriceClientError, match="Network error"):
                client.get_token_price(SUN)
