"""Lot domain model — pure dataclass, no persistence dependency."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from src.fa_common.enums import LotStatus


@dataclass
class Lot:
    id: str
    lot_number: str
    supplier_id: str
    fish_type: str
    weight_kg: Decimal
    reserve_price_cents: int | None = None
    status: LotStatus = LotStatus.AVAILABLE
    created_at: datetime | None = None
    updated_at: datetime | None = None
