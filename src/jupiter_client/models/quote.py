"""Quote request and response models."""

import copy
from decimal import Decimal
from enum import Enum
from typing import Any, Iterator, Optional

from pydantic import ConfigDict, Field, PrivateAttr, RootModel, field_serializer, model_validator

from jupiter_client.models.base import JupiterModel, Pubkey, RequestModel

MAX_SLIPPAGE_BPS = 10_000

# Query parameters that carry comma-joined DEX labels
_LIST_PARAMS = ("dexes", "excludeDexes")


class SwapMode(str, Enum):
    """Which side of the swap the amount refers to."""

    EXACT_IN = "ExactIn"
    EXACT_OUT = "ExactOut"


class QuoteRequest(RequestModel):
    """Parameters for GET /quote.

    Amounts are integers in the smallest denomination of the token
    (lamports for SOL). Slippage is in basis points.
    """

    input_mint: Pubkey
    output_mint: Pubkey
    amount: int = Field(..., gt=0)
    slippage_bps: int = Field(default=50, ge=0, le=MAX_SLIPPAGE_BPS)
    swap_mode: Optional[SwapMode] = None
    only_direct_routes: Optional[bool] = None
    platform_fee_bps: Optional[int] = Field(default=None, ge=0, le=MAX_SLIPPAGE_BPS)
    dexes: Optional[tuple[str, ...]] = None
    exclude_dexes: Optional[tuple[str, ...]] = None
    as_legacy_transaction: Optional[bool] = None
    max_accounts: Optional[int] = Field(default=None, gt=0)
    restrict_intermediate_tokens: Optional[bool] = None

    @model_validator(mode="after")
    def _check_routing_constraints(self) -> "QuoteRequest":
        if self.input_mint == self.output_mint:
            raise ValueError("input and output mint must differ")
        if self.dexes and self.exclude_dexes:
            raise ValueError("dexes and exclude_dexes are mutually exclusive")
        for labels in (self.dexes, self.exclude_dexes):
            if labels is not None and any(not label or "," in label for label in labels):
                raise ValueError("DEX labels must be non-empty and contain no commas")
        return self

    def to_query_params(self) -> dict[str, str]:
        """Encode as /quote query parameters.

        Numbers become decimal strings, flags lowercase booleans and DEX
        lists comma-joined labels. Unset options are omitted.
        """
        params = {}
        for name, value in self.model_dump(by_alias=True, exclude_none=True).items():
            if isinstance(value, bool):
                params[name] = "true" if value else "false"
            elif isinstance(value, tuple):
                params[name] = ",".join(value)
            elif isinstance(value, SwapMode):
                params[name] = value.value
            else:
                params[name] = str(value)
        return params

    @classmethod
    def from_query_params(cls, params: dict[str, str]) -> "QuoteRequest":
        """Rebuild a request from its encoded query parameters."""
        data: dict[str, Any] = dict(params)
        for name in _LIST_PARAMS:
            if name in data:
                data[name] = tuple(data[name].split(",")) if data[name] else ()
        return cls(**data)


class SwapInfo(JupiterModel):
    """A single AMM hop inside a route plan step."""

    amm_key: Pubkey
    label: Optional[str] = None
    input_mint: Pubkey
    output_mint: Pubkey
    in_amount: int
    out_amount: int
    fee_amount: int = 0
    fee_mint: Optional[Pubkey] = None

    @field_serializer("in_amount", "out_amount", "fee_amount")
    def _amount_as_string(self, value: int) -> str:
        return str(value)


class RoutePlanStep(JupiterModel):
    swap_info: SwapInfo
    percent: int = Field(..., ge=0, le=100)


class RoutePlan(RootModel[tuple[RoutePlanStep, ...]]):
    """Ordered sequence of swap steps returned with a quote."""

    model_config = ConfigDict(frozen=True)

    def __iter__(self) -> Iterator[RoutePlanStep]:
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> RoutePlanStep:
        return self.root[index]

    @property
    def labels(self) -> list[str]:
        """DEX labels in route order."""
        return [step.swap_info.label or "Unknown" for step in self.root]

    def first_hop(self, input_mint: str) -> list[RoutePlanStep]:
        """Steps that consume the quote's input token directly."""
        return [step for step in self.root if step.swap_info.input_mint == input_mint]

    def split_amounts(self, input_mint: str, in_amount: int) -> list[int]:
        """Integer share of ``in_amount`` carried by each first-hop step.

        Shares are floored; the rounding remainder goes to the last step so
        the result always sums to ``in_amount``.
        """
        steps = self.first_hop(input_mint)
        if not steps:
            return []
        shares = [in_amount * step.percent // 100 for step in steps]
        shares[-1] += in_amount - sum(shares)
        return shares


class PlatformFee(JupiterModel):
    amount: int
    fee_bps: int

    @field_serializer("amount")
    def _amount_as_string(self, value: int) -> str:
        return str(value)


class Fee(JupiterModel):
    """One line of a quote's fee breakdown."""

    label: str
    mint: Optional[str]
    amount: int


class QuoteResponse(JupiterModel):
    """Decoded /quote response.

    The raw payload is retained so it can be posted back to /swap unchanged.
    """

    input_mint: Pubkey
    in_amount: int
    output_mint: Pubkey
    out_amount: int
    other_amount_threshold: int
    swap_mode: SwapMode = SwapMode.EXACT_IN
    slippage_bps: int = 0
    platform_fee: Optional[PlatformFee] = None
    price_impact_pct: Decimal
    route_plan: RoutePlan
    context_slot: Optional[int] = None
    time_taken: Optional[float] = None

    _raw: Optional[dict] = PrivateAttr(default=None)

    @model_validator(mode="after")
    def _check_route_plan(self) -> "QuoteResponse":
        first_hop = self.route_plan.first_hop(self.input_mint)
        if not first_hop:
            raise ValueError("route plan has no step consuming the input mint")
        total = sum(step.percent for step in first_hop)
        if total != 100:
            raise ValueError(f"route plan percentages sum to {total}, expected 100")
        return self

    @field_serializer("in_amount", "out_amount", "other_amount_threshold")
    def _amount_as_string(self, value: int) -> str:
        return str(value)

    @field_serializer("price_impact_pct")
    def _decimal_as_string(self, value: Decimal) -> str:
        return str(value)

    @classmethod
    def from_payload(cls, payload: dict) -> "QuoteResponse":
        """Validate a raw /quote payload and keep it for later echoing."""
        quote = cls.model_validate(payload)
        quote._raw = copy.deepcopy(payload)
        return quote

    def to_payload(self) -> dict:
        """Payload to send back as ``quoteResponse``."""
        if self._raw is not None:
            return copy.deepcopy(self._raw)
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")

    @property
    def minimum_out_amount(self) -> int:
        """Worst-case output after slippage (ExactIn) or max input (ExactOut)."""
        return self.other_amount_threshold

    @property
    def route_labels(self) -> list[str]:
        return self.route_plan.labels

    def split_amounts(self) -> list[int]:
        """Input amount carried by each first-hop step."""
        return self.route_plan.split_amounts(self.input_mint, self.in_amount)

    @property
    def fees(self) -> list[Fee]:
        """Fee breakdown: per-hop AMM fees followed by the platform fee."""
        fees = [
            Fee(
                label=step.swap_info.label or "Unknown",
                mint=step.swap_info.fee_mint,
                amount=step.swap_info.fee_amount,
            )
            for step in self.route_plan
        ]
        if self.platform_fee is not None:
            fee_mint = self.output_mint if self.swap_mode == SwapMode.EXACT_IN else self.input_mint
            fees.append(Fee(label="Platform", mint=fee_mint, amount=self.platform_fee.amount))
        return fees
