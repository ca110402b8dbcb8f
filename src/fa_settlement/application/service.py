"""SettlementApplicationService — supplier approval of a closed sale.

approve_sale: PENDING_SUPPLIER_APPROVAL lot -> breakdown of the winning bid
              -> Settlement (PENDING) + lot SOLD.
reject_sale:  lot back to AVAILABLE so it can be auctioned again.
"""

import logging

from config.settings import settings
from src.fa_auction.domain import engine
from src.fa_auction.domain.repository import AuctionRepositoryProtocol
from src.fa_auction.infrastructure.persistence import auction_repository
from src.fa_common.datetime_utils import utc_now
from src.fa_common.enums import AuctionStatus
from src.fa_common.errors import LotNotFoundError, NegativeNetAmountError, NoWinningBidError
from src.fa_common.id_generator import generate_id, next_business_number
from src.fa_lot.domain import lifecycle
from src.fa_lot.domain.models import Lot
from src.fa_lot.domain.repository import LotRepositoryProtocol
from src.fa_lot.infrastructure.persistence import lot_repository
from src.fa_settlement.domain.calculator import (
    SettlementBreakdown,
    SettlementCalculator,
    SettlementConfig,
)
from src.fa_settlement.domain.models import Settlement
from src.fa_settlement.domain.repository import SettlementRepositoryProtocol
from src.fa_settlement.infrastructure.persistence import settlement_repository

logger = logging.getLogger(__name__)


def calculator_from_settings() -> SettlementCalculator:
    return SettlementCalculator(
        SettlementConfig(
            commission_rate_bps=settings.COMMISSION_RATE_BPS,
            labor_fee_cents=settings.LABOR_FEE_CENTS,
        )
    )


class SettlementApplicationService:
    def __init__(
        self,
        repo: SettlementRepositoryProtocol | None = None,
        lot_repo: LotRepositoryProtocol | None = None,
        auction_repo: AuctionRepositoryProtocol | None = None,
        calculator: SettlementCalculator | None = None,
    ) -> None:
        self._repo: SettlementRepositoryProtocol = repo or settlement_repository
        self._lot_repo: LotRepositoryProtocol = lot_repo or lot_repository
        self._auction_repo: AuctionRepositoryProtocol = auction_repo or auction_repository
        self._calculator = calculator or calculator_from_settings()

    def preview(self, gross_amount: int) -> SettlementBreakdown:
        return self._calculator.calculate_settlement(gross_amount)

    async def _load_lot(self, lot_id: str) -> Lot:
        lot = await self._lot_repo.get(lot_id)
        if lot is None:
            raise LotNotFoundError(lot_id)
        return lot

    async def approve_sale(self, lot_id: str) -> tuple[Lot, Settlement]:
        lot = await self._load_lot(lot_id)
        lot = lifecycle.approve_sale(lot)

        closed = [
            a for a in await self._auction_repo.find_by_lot(lot_id)
            if a.status is AuctionStatus.CLOSED
        ]
        if not closed:
            raise NoWinningBidError(lot_id)
        # A rejected sale can be re-auctioned; the latest closed auction is the one approved
        auction = max(closed, key=lambda a: a.window.start_time)
        winner = engine.winning_bid(auction)
        if winner is None:
            raise NoWinningBidError(lot_id)

        breakdown = self._calculator.calculate_settlement(winner.amount)
        if not breakdown.is_payable:
            raise NegativeNetAmountError(breakdown.gross_amount, breakdown.net_to_supplier)

        now = utc_now()
        settlement = Settlement(
            id=generate_id(),
            settlement_number=next_business_number("SET", now),
            lot_id=lot.id,
            auction_id=auction.id,
            bid_id=winner.id,
            buyer_id=winner.bidder_id,
            supplier_id=lot.supplier_id,
            breakdown=breakdown,
            created_at=now,
        )
        await self._repo.save(settlement)
        await self._lot_repo.save(lot)
        logger.info(
            "Sale approved: lot=%s settlement=%s gross=%d commission=%d labor=%d net=%d",
            lot.lot_number, settlement.settlement_number, breakdown.gross_amount,
            breakdown.commission, breakdown.labor_fee, breakdown.net_to_supplier,
        )
        return lot, settlement

    async def reject_sale(self, lot_id: str) -> Lot:
        lot = await self._load_lot(lot_id)
        lot = lifecycle.reject_sale(lot)
        await self._lot_repo.save(lot)
        logger.info("Sale rejected: lot=%s returned to AVAILABLE", lot.lot_number)
        return lot

    async def list_for_lot(self, lot_id: str) -> list[Settlement]:
        await self._load_lot(lot_id)
        return await self._repo.find_by_lot(lot_id)
