"""In-memory SettlementRepository."""

from src.fa_settlement.domain.models import Settlement


class InMemorySettlementRepository:
    def __init__(self) -> None:
        self._settlements: dict[str, Settlement] = {}

    async def get(self, settlement_id: str) -> Settlement | None:
        return self._settlements.get(settlement_id)

    async def save(self, settlement: Settlement) -> None:
        self._settlements[settlement.id] = settlement

    async def find_by_lot(self, lot_id: str) -> list[Settlement]:
        return [s for s in self._settlements.values() if s.lot_id == lot_id]

    def clear(self) -> None:
        self._settlements.clear()


settlement_repository = InMemorySettlementRepository()
