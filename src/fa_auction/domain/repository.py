"""Repository Protocol — dependency inversion for testability.

Unit tests inject a mock or a fresh in-memory repository.
Storage itself is out of scope; infrastructure ships an in-memory version.
"""

from typing import Protocol

from src.fa_auction.domain.models import AuctionState


class AuctionRepositoryProtocol(Protocol):
    async def get(self, auction_id: str) -> AuctionState | None: ...

    async def save(self, auction: AuctionState) -> None: ...

    async def list_all(self) -> list[AuctionState]: ...

    async def find_by_lot(self, lot_id: str) -> list[AuctionState]: ...
