"""Shared pydantic base classes and field types."""

from typing import Annotated

import base58
from pydantic import AfterValidator, BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from jupiter_client.errors import InvalidRequest

PUBKEY_LENGTH = 32


def validate_pubkey(value: str) -> str:
    """Check that a string is a base58 encoded 32 byte Solana public key."""
    if not value:
        raise ValueError("public key is empty")
    try:
        decoded = base58.b58decode(value)
    except ValueError as e:
        raise ValueError(f"public key {value!r} is not valid base58") from e
    if len(decoded) != PUBKEY_LENGTH:
        raise ValueError(
            f"public key {value!r} decodes to {len(decoded)} bytes, expected {PUBKEY_LENGTH}"
        )
    return value


Pubkey = Annotated[str, AfterValidator(validate_pubkey)]


def format_validation_error(error: ValidationError) -> str:
    """Flatten a pydantic ValidationError into a single line."""
    parts = []
    for item in error.errors():
        location = ".".join(str(loc) for loc in item["loc"]) or "request"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)


class JupiterModel(BaseModel):
    """Immutable model mapped to the camelCase Jupiter wire format."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class RequestModel(JupiterModel):
    """Base for caller-built requests.

    Construction errors surface as InvalidRequest instead of pydantic's
    ValidationError, so bad input is rejected before any network call.
    """

    model_config = ConfigDict(extra="forbid")

    def __init__(self, **data):
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise InvalidRequest(
                f"Invalid {type(self).__name__}: {format_validation_error(e)}"
            ) from e
