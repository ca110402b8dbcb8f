"""Lot status transitions around an auction.

AVAILABLE --begin_auction--> IN_AUCTION
IN_AUCTION --finish_auction--> PENDING_SUPPLIER_APPROVAL (winner) | UNSOLD (no bids)
PENDING_SUPPLIER_APPROVAL --approve_sale--> SOLD
PENDING_SUPPLIER_APPROVAL --reject_sale--> AVAILABLE
"""

from src.fa_common.datetime_utils import utc_now
from src.fa_common.enums import LotStatus
from src.fa_common.errors import AppError, LotNotAvailableError, LotNotPendingApprovalError
from src.fa_lot.domain.models import Lot


def starting_price(lot: Lot, reserve_pct: int = 80, per_kg_cents: int = 1000) -> int:
    """Opening minimum bid: reserve_pct% of the reserve, else weight x per-kg rate (floored)."""
    if lot.reserve_price_cents:
        return lot.reserve_price_cents * reserve_pct // 100
    return int(lot.weight_kg * per_kg_cents)


def _transition(lot: Lot, status: LotStatus) -> Lot:
    lot.status = status
    lot.updated_at = utc_now()
    return lot


def begin_auction(lot: Lot) -> Lot:
    if lot.status is not LotStatus.AVAILABLE:
        raise LotNotAvailableError(lot.id, lot.status.value)
    return _transition(lot, LotStatus.IN_AUCTION)


def finish_auction(lot: Lot, has_winner: bool) -> Lot:
    if lot.status is not LotStatus.IN_AUCTION:
        raise AppError(
            1005, f"Lot {lot.id} in status {lot.status.value} is not in auction", 422
        )
    if has_winner:
        return _transition(lot, LotStatus.PENDING_SUPPLIER_APPROVAL)
    return _transition(lot, LotStatus.UNSOLD)


def approve_sale(lot: Lot) -> Lot:
    if lot.status is not LotStatus.PENDING_SUPPLIER_APPROVAL:
        raise LotNotPendingApprovalError(lot.id, lot.status.value)
    return _transition(lot, LotStatus.SOLD)


def reject_sale(lot: Lot) -> Lot:
    if lot.status is not LotStatus.PENDING_SUPPLIER_APPROVAL:
        raise LotNotPendingApprovalError(lot.id, lot.status.value)
    return _transition(lot, LotStatus.AVAILABLE)
