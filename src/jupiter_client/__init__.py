"""Typed async client for the Jupiter (Solana) quote and swap API."""

from jupiter_client.client import QuoteClient, create_quote_client
from jupiter_client.config import JupiterSettings, get_settings
from jupiter_client.errors import (
    DecodeError,
    InvalidRequest,
    JupiterError,
    RemoteError,
    TransportError,
)
from jupiter_client.models import (
    AccountMeta,
    Fee,
    Instruction,
    PlatformFee,
    Price,
    PrioritizationFee,
    PriorityLevel,
    QuoteRequest,
    QuoteResponse,
    RoutePlan,
    RoutePlanStep,
    SwapInfo,
    SwapInstructions,
    SwapMode,
    SwapRequest,
    SwapTransaction,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "QuoteClient",
    "create_quote_client",
    "JupiterSettings",
    "get_settings",
    # Errors
    "JupiterError",
    "InvalidRequest",
    "TransportError",
    "RemoteError",
    "DecodeError",
    # Models
    "QuoteRequest",
    "QuoteResponse",
    "SwapMode",
    "SwapInfo",
    "RoutePlan",
    "RoutePlanStep",
    "PlatformFee",
    "Fee",
    "SwapRequest",
    "SwapTransaction",
    "SwapInstructions",
    "Instruction",
    "AccountMeta",
    "PrioritizationFee",
    "PriorityLevel",
    "Price",
]
