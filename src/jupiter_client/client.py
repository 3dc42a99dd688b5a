"""Jupiter aggregator API client for Solana.

Wraps the quote, swap, price and metadata endpoints.
API docs: https://station.jup.ag/docs/apis/swap-api
"""

import logging
from typing import Any, Optional, Union

import httpx
from pydantic import TypeAdapter, ValidationError

from jupiter_client.config import JupiterSettings, get_settings
from jupiter_client.errors import DecodeError, InvalidRequest, RemoteError, TransportError
from jupiter_client.models.base import format_validation_error
from jupiter_client.models.price import IndexedRouteMap, Price, PriceResponse
from jupiter_client.models.quote import QuoteRequest, QuoteResponse
from jupiter_client.models.swap import SwapInstructions, SwapRequest, SwapTransaction

logger = logging.getLogger(__name__)

_TOKEN_LIST = TypeAdapter(list[str])
_LABEL_MAP = TypeAdapter(dict[str, str])


def _error_details(response: httpx.Response) -> tuple[str, Optional[str]]:
    """Pull the server's error message and code out of a failed response."""
    try:
        body = response.json()
    except ValueError:
        return response.text, None

    if isinstance(body, dict):
        message = body.get("error") or body.get("message")
        if message is not None:
            error_code = body.get("errorCode")
            return str(message), str(error_code) if error_code is not None else None
    return response.text, None


class QuoteClient:
    """Typed client for the Jupiter quote/swap API.

    Every method is a single HTTP round trip with no retries or caching.
    The client holds only configuration and the transport, so one instance
    can be shared between concurrent tasks.

    Usage:
        async with QuoteClient() as client:
            quote = await client.get_quote(QuoteRequest(...))
            swap = await client.get_swap_transaction(
                SwapRequest(user_public_key=wallet, quote_response=quote)
            )
    """

    def __init__(
        self,
        settings: Optional[JupiterSettings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize the client.

        Args:
            settings: Endpoint and timeout configuration (defaults to environment)
            http_client: Transport to use; created (and owned) here if omitted
        """
        self.settings = settings or get_settings()
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=self.settings.timeout)

    async def __aenter__(self) -> "QuoteClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_client:
            await self._http.aclose()

    @property
    def quote_api_url(self) -> str:
        return self.settings.quote_api_url.rstrip("/")

    @property
    def price_api_url(self) -> str:
        return self.settings.price_api_url.rstrip("/")

    async def _request(
        self,
        method: str,
        url: str,
        params: Optional[dict] = None,
        json: Optional[dict] = None,
    ) -> Any:
        """Send one request and return the decoded JSON body."""
        logger.debug(f"Jupiter {method} {url} params={params}")

        try:
            response = await self._http.request(
                method,
                url,
                params=params,
                json=json,
                headers=self.settings.get_headers(),
            )
        except httpx.RequestError as e:
            logger.warning(f"Jupiter transport error on {method} {url}: {type(e).__name__}: {e}")
            raise TransportError(f"{method} {url} failed: {e}") from e

        if not response.is_success:
            message, error_code = _error_details(response)
            logger.warning(f"Jupiter API error: {response.status_code} - {message}")
            raise RemoteError(response.status_code, message, error_code)

        try:
            return response.json()
        except ValueError as e:
            logger.warning(f"Jupiter returned non-JSON body for {method} {url}")
            raise DecodeError(f"Response from {url} is not valid JSON: {e}") from e

    @staticmethod
    def _decode(what: str, decoder, data: Any):
        try:
            return decoder(data)
        except ValidationError as e:
            logger.warning(f"Unexpected {what} payload: {e.error_count()} error(s)")
            raise DecodeError(f"Malformed {what} response: {format_validation_error(e)}") from e

    async def get_quote(self, request: QuoteRequest) -> QuoteResponse:
        """Get the best swap route for a request.

        Args:
            request: Validated quote parameters

        Returns:
            QuoteResponse with route plan, amounts and price impact

        Raises:
            InvalidRequest, TransportError, RemoteError, DecodeError
        """
        if not isinstance(request, QuoteRequest):
            raise InvalidRequest(f"Expected QuoteRequest, got {type(request).__name__}")

        data = await self._request("GET", f"{self.quote_api_url}/quote", params=request.to_query_params())
        if not isinstance(data, dict):
            raise DecodeError(f"Quote response must be an object, got {type(data).__name__}")

        quote = self._decode("quote", QuoteResponse.from_payload, data)
        logger.debug(
            f"Quote {quote.input_mint} -> {quote.output_mint}: "
            f"{quote.in_amount} -> {quote.out_amount} via {', '.join(quote.route_labels)}"
        )
        return quote

    async def get_swap_transaction(self, request: SwapRequest) -> SwapTransaction:
        """Build the unsigned swap transaction for a quote.

        Returns:
            SwapTransaction with serialized transaction bytes ready for signing
        """
        if not isinstance(request, SwapRequest):
            raise InvalidRequest(f"Expected SwapRequest, got {type(request).__name__}")

        data = await self._request("POST", f"{self.quote_api_url}/swap", json=request.to_payload())
        return self._decode("swap", SwapTransaction.model_validate, data)

    async def get_swap_instructions(self, request: SwapRequest) -> SwapInstructions:
        """Get the swap as individual instructions instead of a transaction."""
        if not isinstance(request, SwapRequest):
            raise InvalidRequest(f"Expected SwapRequest, got {type(request).__name__}")

        data = await self._request(
            "POST", f"{self.quote_api_url}/swap-instructions", json=request.to_payload()
        )
        return self._decode("swap-instructions", SwapInstructions.model_validate, data)

    async def get_price(
        self,
        ids: Union[str, list[str]],
        vs_token: Optional[str] = None,
    ) -> dict[str, Optional[Price]]:
        """Get unit prices for one or more tokens.

        Args:
            ids: Mint address(es) or symbol(s)
            vs_token: Quote token (defaults to USDC on the server)

        Returns:
            Mapping of requested id to Price (None if the server has no price)
        """
        if isinstance(ids, str):
            ids = [ids]
        if not ids or any(not token_id for token_id in ids):
            raise InvalidRequest("At least one non-empty token id is required")

        params = {"ids": ",".join(ids)}
        if vs_token:
            params["vsToken"] = vs_token

        data = await self._request("GET", f"{self.price_api_url}/price", params=params)
        return self._decode("price", PriceResponse.model_validate, data).data

    async def get_route_map(self, only_direct_routes: bool = False) -> dict[str, list[str]]:
        """Map each input mint to the output mints it can be swapped into."""
        data = await self._request(
            "GET",
            f"{self.quote_api_url}/indexed-route-map",
            params={"onlyDirectRoutes": "true" if only_direct_routes else "false"},
        )
        indexed = self._decode("route map", IndexedRouteMap.model_validate, data)
        try:
            return indexed.resolve()
        except IndexError as e:
            raise DecodeError(f"Malformed route map response: {e}") from e

    async def get_tokens(self) -> list[str]:
        """List of tradeable token mints."""
        data = await self._request("GET", f"{self.quote_api_url}/tokens")
        return self._decode("tokens", _TOKEN_LIST.validate_python, data)

    async def get_program_id_to_label(self) -> dict[str, str]:
        """Map of DEX program ids to their labels."""
        data = await self._request("GET", f"{self.quote_api_url}/program-id-to-label")
        return self._decode("program labels", _LABEL_MAP.validate_python, data)


def create_quote_client(
    settings: Optional[JupiterSettings] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> QuoteClient:
    """Create a Jupiter quote client instance."""
    return QuoteClient(settings=settings, http_client=http_client)
