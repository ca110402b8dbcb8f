"""LotApplicationService — create and look up catch lots."""

import logging
from decimal import Decimal

from src.fa_common.datetime_utils import utc_now
from src.fa_common.errors import LotNotFoundError
from src.fa_common.id_generator import generate_id, next_business_number
from src.fa_lot.domain.models import Lot
from src.fa_lot.domain.repository import LotRepositoryProtocol
from src.fa_lot.infrastructure.persistence import lot_repository

logger = logging.getLogger(__name__)


class LotApplicationService:
    def __init__(self, repo: LotRepositoryProtocol | None = None) -> None:
        self._repo: LotRepositoryProtocol = repo or lot_repository

    async def create_lot(
        self,
        supplier_id: str,
        fish_type: str,
        weight_kg: Decimal,
        reserve_price_cents: int | None = None,
    ) -> Lot:
        now = utc_now()
        lot = Lot(
            id=generate_id(),
            lot_number=next_business_number("LOT", now),
            supplier_id=supplier_id,
            fish_type=fish_type,
            weight_kg=weight_kg,
            reserve_price_cents=reserve_price_cents,
            created_at=now,
            updated_at=now,
        )
        await self._repo.save(lot)
        logger.info("Lot created: %s (%s, %s kg)", lot.lot_number, fish_type, weight_kg)
        return lot

    async def get_lot(self, lot_id: str) -> Lot:
        lot = await self._repo.get(lot_id)
        if lot is None:
            raise LotNotFoundError(lot_id)
        return lot
