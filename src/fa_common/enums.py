"""Global enums shared by the auction, lot and settlement modules."""

from enum import Enum


class AuctionStatus(str, Enum):
    """Auction lifecycle.

    The upstream two-state model uses ``closed`` both for "not started yet"
    and for "finished". SCHEDULED is the pre-start ``closed``; CLOSED is the
    terminal one. There is no transition out of CLOSED.
    """

    SCHEDULED = "SCHEDULED"
    OPEN = "OPEN"
    CLOSED = "CLOSED"


class BidRejectionReason(str, Enum):
    AUCTION_NOT_ACTIVE = "AUCTION_NOT_ACTIVE"
    BELOW_MINIMUM = "BELOW_MINIMUM"
    BELOW_INCREMENT = "BELOW_INCREMENT"
    INVALID_AMOUNT = "INVALID_AMOUNT"


class LotStatus(str, Enum):
    AVAILABLE = "AVAILABLE"
    IN_AUCTION = "IN_AUCTION"
    PENDING_SUPPLIER_APPROVAL = "PENDING_SUPPLIER_APPROVAL"
    SOLD = "SOLD"
    UNSOLD = "UNSOLD"


class SettlementStatus(str, Enum):
    PENDING = "PENDING"
