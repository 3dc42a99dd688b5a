"""Well-known Solana token mints and amount conversion helpers."""

from decimal import ROUND_DOWN, Decimal
from typing import Optional, Union

# Token mint addresses on Solana mainnet
SOLANA_TOKENS = {
    "SOL": "So11111111111111111111111111111111111111112",  # Wrapped SOL
    "USDT": "Es9vMFrzaCERmJfrF4H2FYD4KCoNkY11McCe8BenwNYB",
    "USDC": "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v",
    "MSOL": "mSoLzYCxHdYgdzU16g5QSh3i5K3z3KZK7ytfqcJm7So",
    "RAY": "4k3Dyjzvzp8eMZWUXbBCjEvwSkkk59S5iCNLY3QrkX6R",
    "ORCA": "orcaEKTdK7LKz57vaAYr9QeNsVEPfiu6QeMU1kektZE",
    "JUP": "JUPyiwrYJFskUPiHa7hkeR8VUtAeFoSYbKedZNsDvCN",
    "BONK": "DezXAZ8z7PnrnRJjz3wXBoRgixCa6xjnB7YaB1pPB263",
    "WIF": "EKpQGSJtjMFqKZ9KQanSqYXRcF8fBopzLHYxdM65zcjm",
    "PYTH": "HZ1JovNiVvGrGNiiYvEozEVgZ58xaU3RKwX8eACQBCt3",
}

# Token decimals
TOKEN_DECIMALS = {
    "SOL": 9,
    "USDT": 6,
    "USDC": 6,
    "MSOL": 9,
    "RAY": 6,
    "ORCA": 6,
    "JUP": 6,
    "BONK": 5,
    "WIF": 6,
    "PYTH": 6,
}

DEFAULT_DECIMALS = 9


def get_token_mint(symbol: str) -> Optional[str]:
    """Get token mint address by symbol."""
    return SOLANA_TOKENS.get(symbol.upper())


def get_decimals(symbol: str) -> int:
    """Get token decimals, defaulting to SOL's 9."""
    return TOKEN_DECIMALS.get(symbol.upper(), DEFAULT_DECIMALS)


def ui_amount_to_amount(ui_amount: Union[Decimal, str, int, float], decimals: int) -> int:
    """Convert a human-readable amount to the smallest denomination.

    Fractions below one base unit are truncated.
    """
    scaled = Decimal(str(ui_amount)) * (Decimal(10) ** decimals)
    return int(scaled.quantize(Decimal(1), rounding=ROUND_DOWN))


def amount_to_ui_amount(amount: int, decimals: int) -> Decimal:
    """Convert a smallest-denomination amount to human-readable units."""
    return Decimal(amount) / (Decimal(10) ** decimals)
