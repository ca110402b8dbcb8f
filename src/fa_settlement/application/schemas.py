"""Pydantic schemas for fa_settlement API responses."""

from pydantic import BaseModel

from src.fa_common.money import format_money
from src.fa_lot.domain.models import Lot
from src.fa_settlement.domain.calculator import SettlementBreakdown
from src.fa_settlement.domain.models import Settlement


class SettlementBreakdownOut(BaseModel):
    gross_amount_cents: int
    commission_cents: int
    labor_fee_cents: int
    net_to_supplier_cents: int
    commission_rate: str  # "0.06"
    commission_rate_bps: int
    labor_fee_fixed_cents: int
    gross_amount_display: str
    commission_display: str
    labor_fee_display: str
    net_to_supplier_display: str

    @classmethod
    def from_domain(cls, b: SettlementBreakdown, symbol: str = "₱") -> "SettlementBreakdownOut":
        return cls(
            gross_amount_cents=b.gross_amount,
            commission_cents=b.commission,
            labor_fee_cents=b.labor_fee,
            net_to_supplier_cents=b.net_to_supplier,
            commission_rate=str(b.commission_rate),
            commission_rate_bps=b.commission_rate_bps,
            labor_fee_fixed_cents=b.labor_fee_fixed,
            gross_amount_display=format_money(b.gross_amount, symbol),
            commission_display=format_money(b.commission, symbol),
            labor_fee_display=format_money(b.labor_fee, symbol),
            net_to_supplier_display=format_money(b.net_to_supplier, symbol),
        )


class SettlementResponse(BaseModel):
    id: str
    settlement_number: str
    lot_id: str
    auction_id: str
    bid_id: str
    buyer_id: str
    supplier_id: str
    status: str
    breakdown: SettlementBreakdownOut
    created_at: str | None

    @classmethod
    def from_domain(cls, s: Settlement, symbol: str = "₱") -> "SettlementResponse":
        return cls(
            id=s.id,
            settlement_number=s.settlement_number,
            lot_id=s.lot_id,
            auction_id=s.auction_id,
            bid_id=s.bid_id,
            buyer_id=s.buyer_id,
            supplier_id=s.supplier_id,
            status=s.status.value,
            breakdown=SettlementBreakdownOut.from_domain(s.breakdown, symbol),
            created_at=s.created_at.isoformat() if s.created_at else None,
        )


class ApproveSaleResponse(BaseModel):
    lot_id: str
    lot_status: str
    settlement: SettlementResponse


class RejectSaleResponse(BaseModel):
    lot_id: str
    lot_status: str

    @classmethod
    def from_domain(cls, lot: Lot) -> "RejectSaleResponse":
        return cls(lot_id=lot.id, lot_status=lot.status.value)
