"""Price, route map and token list models."""

from decimal import Decimal
from typing import Optional

from jupiter_client.models.base import JupiterModel, Pubkey


class Price(JupiterModel):
    id: str
    mint_symbol: Optional[str] = None
    vs_token: Optional[str] = None
    vs_token_symbol: Optional[str] = None
    price: Optional[Decimal] = None


class PriceResponse(JupiterModel):
    # Unknown ids come back as null entries
    data: dict[str, Optional[Price]]
    time_taken: Optional[float] = None


class IndexedRouteMap(JupiterModel):
    """Route map where mints are referenced by index into ``mint_keys``."""

    mint_keys: list[Pubkey]
    indexed_route_map: dict[int, list[int]]

    def resolve(self) -> dict[str, list[str]]:
        """Expand indices into mint addresses.

        Raises:
            IndexError: if an index points outside ``mint_keys``
        """
        route_map = {}
        for from_index, to_indices in self.indexed_route_map.items():
            route_map[self._mint(from_index)] = [self._mint(i) for i in to_indices]
        return route_map

    def _mint(self, index: int) -> str:
        if not 0 <= index < len(self.mint_keys):
            raise IndexError(f"mint index {index} out of range (have {len(self.mint_keys)} keys)")
        return self.mint_keys[index]
