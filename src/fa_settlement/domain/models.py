"""Settlement record — what the supplier is owed for one approved sale."""

from dataclasses import dataclass
from datetime import datetime

from src.fa_common.enums import SettlementStatus
from src.fa_settlement.domain.calculator import SettlementBreakdown


@dataclass
class Settlement:
    id: str
    settlement_number: str
    lot_id: str
    auction_id: str
    bid_id: str
    buyer_id: str
    supplier_id: str
    breakdown: SettlementBreakdown
    status: SettlementStatus = SettlementStatus.PENDING
    created_at: datetime | None = None
