"""Swap request, transaction and instruction models."""

import base64
from enum import Enum
from typing import Optional, Union

from pydantic import Base64Bytes, Field, model_validator

from jupiter_client.models.base import JupiterModel, Pubkey, RequestModel
from jupiter_client.models.quote import QuoteResponse


class PrioritizationFeeKind(str, Enum):
    AUTO = "auto"
    EXACT = "exact"
    AUTO_MULTIPLIER = "autoMultiplier"
    JITO_TIP = "jitoTipLamports"
    PRIORITY_LEVEL = "priorityLevelWithMaxLamports"


class PriorityLevel(str, Enum):
    MEDIUM = "medium"
    HIGH = "high"
    VERY_HIGH = "veryHigh"


class PrioritizationFee(RequestModel):
    """Priority fee setting for /swap.

    Build with one of the constructors rather than directly.
    """

    kind: PrioritizationFeeKind
    lamports: Optional[int] = Field(default=None, ge=0)
    multiplier: Optional[int] = Field(default=None, gt=0)
    priority_level: Optional[PriorityLevel] = None

    @model_validator(mode="after")
    def _check_kind_fields(self) -> "PrioritizationFee":
        needs_lamports = (
            PrioritizationFeeKind.EXACT,
            PrioritizationFeeKind.JITO_TIP,
            PrioritizationFeeKind.PRIORITY_LEVEL,
        )
        if self.kind in needs_lamports and self.lamports is None:
            raise ValueError(f"{self.kind.value} fee requires lamports")
        if self.kind == PrioritizationFeeKind.AUTO_MULTIPLIER and self.multiplier is None:
            raise ValueError("autoMultiplier fee requires multiplier")
        if self.kind == PrioritizationFeeKind.PRIORITY_LEVEL and self.priority_level is None:
            raise ValueError("priorityLevelWithMaxLamports fee requires priority_level")
        return self

    @classmethod
    def auto(cls) -> "PrioritizationFee":
        return cls(kind=PrioritizationFeeKind.AUTO)

    @classmethod
    def exact(cls, lamports: int) -> "PrioritizationFee":
        return cls(kind=PrioritizationFeeKind.EXACT, lamports=lamports)

    @classmethod
    def auto_multiplier(cls, multiplier: int) -> "PrioritizationFee":
        return cls(kind=PrioritizationFeeKind.AUTO_MULTIPLIER, multiplier=multiplier)

    @classmethod
    def jito_tip(cls, lamports: int) -> "PrioritizationFee":
        return cls(kind=PrioritizationFeeKind.JITO_TIP, lamports=lamports)

    @classmethod
    def with_priority_level(cls, level: PriorityLevel, max_lamports: int) -> "PrioritizationFee":
        return cls(
            kind=PrioritizationFeeKind.PRIORITY_LEVEL,
            priority_level=level,
            lamports=max_lamports,
        )

    def to_payload(self) -> Union[str, int, dict]:
        """Encode in the shape the /swap endpoint expects."""
        if self.kind == PrioritizationFeeKind.AUTO:
            return "auto"
        if self.kind == PrioritizationFeeKind.EXACT:
            return self.lamports
        if self.kind == PrioritizationFeeKind.AUTO_MULTIPLIER:
            return {"autoMultiplier": self.multiplier}
        if self.kind == PrioritizationFeeKind.JITO_TIP:
            return {"jitoTipLamports": self.lamports}
        return {
            "priorityLevelWithMaxLamports": {
                "priorityLevel": self.priority_level.value,
                "maxLamports": self.lamports,
            }
        }


class SwapRequest(RequestModel):
    """Body for POST /swap and /swap-instructions."""

    user_public_key: Pubkey
    quote_response: QuoteResponse
    wrap_and_unwrap_sol: bool = True
    use_shared_accounts: Optional[bool] = None
    fee_account: Optional[Pubkey] = None
    compute_unit_price_micro_lamports: Optional[int] = Field(default=None, ge=0)
    prioritization_fee_lamports: Optional[PrioritizationFee] = None
    as_legacy_transaction: Optional[bool] = None
    use_token_ledger: Optional[bool] = None
    destination_token_account: Optional[Pubkey] = None
    dynamic_compute_unit_limit: Optional[bool] = None
    skip_user_accounts_rpc_calls: Optional[bool] = None

    def to_payload(self) -> dict:
        """JSON body with the quote echoed back as received."""
        payload = self.model_dump(
            by_alias=True,
            exclude_none=True,
            mode="json",
            exclude={"quote_response", "prioritization_fee_lamports"},
        )
        payload["quoteResponse"] = self.quote_response.to_payload()
        if self.prioritization_fee_lamports is not None:
            payload["prioritizationFeeLamports"] = self.prioritization_fee_lamports.to_payload()
        return payload


class SwapTransaction(JupiterModel):
    """Unsigned swap transaction returned by /swap.

    ``swap_transaction`` holds the serialized transaction bytes. Signing
    and submission are up to the caller.
    """

    swap_transaction: Base64Bytes
    last_valid_block_height: int
    prioritization_fee_lamports: Optional[int] = None

    def to_base64(self) -> str:
        return base64.b64encode(self.swap_transaction).decode("ascii")


class AccountMeta(JupiterModel):
    pubkey: Pubkey
    is_signer: bool
    is_writable: bool


class Instruction(JupiterModel):
    program_id: Pubkey
    accounts: tuple[AccountMeta, ...]
    data: Base64Bytes


class SwapInstructions(JupiterModel):
    """Swap split into individual instructions by /swap-instructions."""

    token_ledger_instruction: Optional[Instruction] = None
    compute_budget_instructions: tuple[Instruction, ...] = ()
    setup_instructions: tuple[Instruction, ...] = ()
    swap_instruction: Instruction
    cleanup_instruction: Optional[Instruction] = None
    address_lookup_table_addresses: tuple[Pubkey, ...] = ()

    @property
    def instructions(self) -> list[Instruction]:
        """All instructions in execution order."""
        ordered = list(self.compute_budget_instructions)
        if self.token_ledger_instruction is not None:
            ordered.append(self.token_ledger_instruction)
        ordered.extend(self.setup_instructions)
        ordered.append(self.swap_instruction)
        if self.cleanup_instruction is not None:
            ordered.append(self.cleanup_instruction)
        return ordered
