"""Pytest configuration and fixtures."""

import json
from typing import AsyncGenerator, Callable, Union

import httpx
import pytest
import pytest_asyncio

from jupiter_client.client import QuoteClient
from jupiter_client.config import JupiterSettings

QUOTE_API = "https://quote.test/v6"
PRICE_API = "https://price.test/v6"

SOL_MINT = "So11111111111111111111111111111111111111112"
USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
USDT_MINT = "Es9vMFrzaCERmJfrF4H2FYD4KCoNkY11McCe8BenwNYB"
MSOL_MINT = "mSoLzYCxHdYgdzU16g5QSh3i5K3z3KZK7ytfqcJm7So"
# 32 zero bytes
USER_PUBKEY = "11111111111111111111111111111111"
JUPITER_PROGRAM = "JUP6LkbZbjS1jKKwapdHNy74zcZ3tLUZoi5QNyVTaV4"
COMPUTE_BUDGET_PROGRAM = "ComputeBudget111111111111111111111111111111"

Handler = Union[httpx.Response, Callable[[httpx.Request], httpx.Response]]


class MockJupiterAPI:
    """Routes requests by (method, path) and records everything it sees."""

    def __init__(self):
        self.routes: dict[tuple[str, str], Handler] = {}
        self.requests: list[httpx.Request] = []

    def add(self, method: str, path: str, handler: Handler) -> None:
        self.routes[(method, path)] = handler

    def add_json(self, method: str, path: str, body, status_code: int = 200) -> None:
        self.add(method, path, httpx.Response(status_code, json=body))

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.routes.get((request.method, request.url.path))
        if handler is None:
            return httpx.Response(404, json={"error": f"No route for {request.url.path}"})
        if callable(handler):
            return handler(request)
        return handler

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> dict:
        return json.loads(self.last_request.content)


def make_quote_payload(**overrides) -> dict:
    """Realistic /quote body for 1 SOL -> USDC split across two AMMs."""
    payload = {
        "inputMint": SOL_MINT,
        "inAmount": "1000000000",
        "outputMint": USDC_MINT,
        "outAmount": "150000000",
        "otherAmountThreshold": "149250000",
        "swapMode": "ExactIn",
        "slippageBps": 50,
        "platformFee": None,
        "priceImpactPct": "0.01",
        "routePlan": [
            {
                "swapInfo": {
                    "ammKey": USDT_MINT,
                    "label": "Whirlpool",
                    "inputMint": SOL_MINT,
                    "outputMint": USDC_MINT,
                    "inAmount": "600000000",
                    "outAmount": "90000000",
                    "feeAmount": "1200",
                    "feeMint": SOL_MINT,
                },
                "percent": 60,
            },
            {
                "swapInfo": {
                    "ammKey": MSOL_MINT,
                    "label": "Raydium CLMM",
                    "inputMint": SOL_MINT,
                    "outputMint": USDC_MINT,
                    "inAmount": "400000000",
                    "outAmount": "60000000",
                    "feeAmount": "800",
                    "feeMint": SOL_MINT,
                },
                "percent": 40,
            },
        ],
        "contextSlot": 284512345,
        "timeTaken": 0.012,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def settings() -> JupiterSettings:
    return JupiterSettings(quote_api_url=QUOTE_API, price_api_url=PRICE_API, timeout=5.0)


@pytest.fixture
def quote_payload() -> dict:
    return make_quote_payload()


@pytest.fixture
def mock_api() -> MockJupiterAPI:
    return MockJupiterAPI()


@pytest_asyncio.fixture
async def client(settings, mock_api) -> AsyncGenerator[QuoteClient, None]:
    """QuoteClient wired to the in-memory mock API."""
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(mock_api.handle))
    quote_client = QuoteClient(settings=settings, http_client=http_client)
    yield quote_client
    await http_client.aclose()
