from typing import Protocol

from src.fa_settlement.domain.models import Settlement


class SettlementRepositoryProtocol(Protocol):
    async def get(self, settlement_id: str) -> Settlement | None: ...

    async def save(self, settlement: Settlement) -> None: ...

    async def find_by_lot(self, lot_id: str) -> list[Settlement]: ...
