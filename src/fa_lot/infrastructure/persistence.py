"""In-memory LotRepository. Stores copies so callers must save() to persist changes."""

from dataclasses import replace

from src.fa_lot.domain.models import Lot


class InMemoryLotRepository:
    def __init__(self) -> None:
        self._lots: dict[str, Lot] = {}

    async def get(self, lot_id: str) -> Lot | None:
        lot = self._lots.get(lot_id)
        return replace(lot) if lot is not None else None

    async def save(self, lot: Lot) -> None:
        self._lots[lot.id] = replace(lot)

    def clear(self) -> None:
        self._lots.clear()


lot_repository = InMemoryLotRepository()
