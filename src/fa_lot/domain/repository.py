from typing import Protocol

from src.fa_lot.domain.models import Lot


class LotRepositoryProtocol(Protocol):
    async def get(self, lot_id: str) -> Lot | None: ...

    async def save(self, lot: Lot) -> None: ...
