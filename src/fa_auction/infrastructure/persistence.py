"""In-memory AuctionRepository.

AuctionState is frozen, so storing the snapshot itself is safe: callers can
only replace it through save().
"""

from src.fa_auction.domain.models import AuctionState


class InMemoryAuctionRepository:
    def __init__(self) -> None:
        self._auctions: dict[str, AuctionState] = {}

    async def get(self, auction_id: str) -> AuctionState | None:
        return self._auctions.get(auction_id)

    async def save(self, auction: AuctionState) -> None:
        self._auctions[auction.id] = auction

    async def list_all(self) -> list[AuctionState]:
        return list(self._auctions.values())

    async def find_by_lot(self, lot_id: str) -> list[AuctionState]:
        return [a for a in self._auctions.values() if a.lot_id == lot_id]

    def clear(self) -> None:
        self._auctions.clear()


auction_repository = InMemoryAuctionRepository()
