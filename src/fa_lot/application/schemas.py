"""Pydantic schemas for fa_lot API requests/responses."""

from decimal import Decimal

from pydantic import BaseModel, Field

from src.fa_common.money import format_money
from src.fa_lot.domain.models import Lot


class CreateLotRequest(BaseModel):
    supplier_id: str = Field(..., min_length=1)
    fish_type: str = Field(..., min_length=1, max_length=100)
    weight_kg: Decimal = Field(..., gt=0, decimal_places=3)
    reserve_price_cents: int | None = Field(None, ge=0)


class LotResponse(BaseModel):
    id: str
    lot_number: str
    supplier_id: str
    fish_type: str
    weight_kg: str
    reserve_price_cents: int | None
    reserve_price_display: str | None
    status: str
    created_at: str | None
    updated_at: str | None

    @classmethod
    def from_domain(cls, lot: Lot, symbol: str = "₱") -> "LotResponse":
        return cls(
            id=lot.id,
            lot_number=lot.lot_number,
            supplier_id=lot.supplier_id,
            fish_type=lot.fish_type,
            weight_kg=str(lot.weight_kg),
            reserve_price_cents=lot.reserve_price_cents,
            reserve_price_display=(
                format_money(lot.reserve_price_cents, symbol)
                if lot.reserve_price_cents is not None
                else None
            ),
            status=lot.status.value,
            created_at=lot.created_at.isoformat() if lot.created_at else None,
            updated_at=lot.updated_at.isoformat() if lot.updated_at else None,
        )
