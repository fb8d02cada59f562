"""
Sun open API price client

Fetches token prices from https://open.sun.io/apiv2/price. The endpoint
answers with:

    {"code": 0, "data": {"<address>": {"quote": {"USD": {"price": "0.12", "last_updated": 1700000000000}}}}}

Usage:
    with PriceClient() as client:
        quote = client.get_token_price("TR7NHqjeKQxGTCi8q8ZY4pL8otSzgjLj6t")
"""

import logging
import time
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional

import httpx

from ..config import settings

logger = logging.getLogger(__name__)


@dataclass
class PriceClientConfig:
    """Price API client settings"""
    base_url: str = settings.SUN_PRICE_API
    timeout: float = settings.REQUEST_TIMEOUT
    max_retries: int = settings.MAX_RETRIES
    retry_delay: float = 1.0


@dataclass(frozen=True)
class PriceQuote:
    """Token price in a quote currency"""
    address: str
    currency: str
    price: Decimal
    last_updated: Optional[int] = None  # unix ms


class PriceClientError(Exception):
    """Price API error"""
    pass


class PriceClient:
    """Client for the Sun token price endpoint

    Transport errors and 5xx responses are retried; malformed or
    unsuccessful API payloads fail immediately.
    """

    def __init__(
        self,
        config: Optional[PriceClientConfig] = None,
        transport: Optional[httpx.BaseTransport] = None
    ):
        self.config = config or PriceClientConfig()
        self._client = httpx.Client(timeout=self.config.timeout, transport=transport)

    def __enter__(self) -> "PriceClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def _get(self, params: Dict[str, str]) -> Any:
        """GET the price endpoint with retries

        Raises:
            PriceClientError: after the last failed attempt
        """
        last_error = None
        for attempt in range(self.config.max_retries):
            try:
                response = self._client.get(self.config.base_url, params=params)
                response.raise_for_status()
                return response.json()

            except httpx.TimeoutException:
                last_error = PriceClientError(f"Request timed out ({self.config.timeout}s)")
            except httpx.HTTPStatusError as e:
                if e.response.status_code < 500:
                    raise PriceClientError(f"HTTP error: {e.response.status_code}") from e
                last_error = PriceClientError(f"HTTP error: {e.response.status_code}")
            except httpx.HTTPError as e:
                last_error = PriceClientError(f"Network error: {e}")
            except ValueError as e:
                raise PriceClientError(f"Invalid JSON response: {e}") from e

            logger.warning(
                "Price request failed (attempt %d/%d): %s",
                attempt + 1, self.config.max_retries, last_error
            )
            if attempt < self.config.max_retries - 1:
                time.sleep(self.config.retry_delay * (attempt + 1))

        raise last_error or PriceClientError("No request attempted")

    def get_token_price(self, address: str, currency: str = "USD") -> PriceQuote:
        """Price of one token

        Args:
            address: token contract address (base58)
            currency: quote currency, e.g. USD

        Returns:
            PriceQuote

        Raises:
            PriceClientError: API error, missing quote or non-positive price
        """
        currency = currency.upper()
        logger.debug("Fetching %s price for %s", currency, address)
        payload = self._get({"tokenAddress": address})

        if not isinstance(payload, dict):
            raise PriceClientError("Malformed price response")
        if payload.get("code") != 0:
            message = payload.get("msg") or payload.get("message") or "unknown error"
            raise PriceClientError(f"API error (code {payload.get('code')}): {message}")

        data = payload.get("data")
        if not data or not isinstance(data, dict) or address not in data:
            raise PriceClientError(f"No price data for token {address}")

        entry = data[address]
        if not isinstance(entry, dict) or not isinstance(entry.get("quote") or {}, dict):
            raise PriceClientError(f"Malformed price response for token {address}")

        quote = (entry.get("quote") or {}).get(currency)
        if not quote:
            raise PriceClientError(f"No {currency} quote for token {address}")
        if not isinstance(quote, dict):
            raise PriceClientError(f"Malformed price response for token {address}")

        try:
            price = Decimal(str(quote.get("price")))
        except InvalidOperation as e:
            raise PriceClientError(f"Invalid price: {quote.get('price')}") from e
        if not price.is_finite() or price <= 0:
            raise PriceClientError(f"Invalid price: {quote.get('price')}")

        last_updated = quote.get("last_updated")
        try:
            last_updated = int(last_updated) if last_updated is not None else None
        except (TypeError, ValueError) as e:
            raise PriceClientError(f"Invalid timestamp: {last_updated}") from e

        return PriceQuote(
            address=address,
            currency=currency,
            price=price,
            last_updated=last_updated,
        )
