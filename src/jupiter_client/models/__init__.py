"""Typed request and response models for the Jupiter API."""

from jupiter_client.models.base import JupiterModel, Pubkey, RequestModel, validate_pubkey
from jupiter_client.models.price import IndexedRouteMap, Price, PriceResponse
from jupiter_client.models.quote import (
    Fee,
    PlatformFee,
    QuoteRequest,
    QuoteResponse,
    RoutePlan,
    RoutePlanStep,
    SwapInfo,
    SwapMode,
)
from jupiter_client.models.swap import (
    AccountMeta,
    Instruction,
    PrioritizationFee,
    PrioritizationFeeKind,
    PriorityLevel,
    SwapInstructions,
    SwapRequest,
    SwapTransaction,
)

__all__ = [
    # Base
    "JupiterModel",
    "RequestModel",
    "Pubkey",
    "validate_pubkey",
    # Quote
    "QuoteRequest",
    "QuoteResponse",
    "SwapMode",
    "SwapInfo",
    "RoutePlan",
    "RoutePlanStep",
    "PlatformFee",
    "Fee",
    # Swap
    "SwapRequest",
    "SwapTransaction",
    "SwapInstructions",
    "Instruction",
    "AccountMeta",
    "PrioritizationFee",
    "PrioritizationFeeKind",
    "PriorityLevel",
    # Price / metadata
    "Price",
    "PriceResponse",
    "IndexedRouteMap",
]
