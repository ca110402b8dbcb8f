"""Auction domain models — frozen dataclasses, no I/O.

State changes never mutate these objects; the engine returns new snapshots
via dataclasses.replace.
"""

from dataclasses import dataclass
from datetime import datetime

from src.fa_common.enums import AuctionStatus, BidRejectionReason
from src.fa_common.errors import (
    AuctionNotActiveError,
    BidBelowIncrementError,
    BidBelowMinimumError,
    BidRejectedError,
    InvalidAuctionWindowError,
    InvalidBidAmountError,
)


@dataclass(frozen=True)
class AuctionWindow:
    status: AuctionStatus
    start_time: datetime
    end_time: datetime
    minimum_bid: int  # centavos
    bid_increment: int  # centavos, > 0

    def __post_init__(self) -> None:
        if self.end_time <= self.start_time:
            raise InvalidAuctionWindowError("end_time must be after start_time")
        if self.bid_increment <= 0:
            raise InvalidAuctionWindowError(
                f"bid_increment must be positive, got {self.bid_increment}"
            )
        if self.minimum_bid < 0:
            raise InvalidAuctionWindowError(
                f"minimum_bid must not be negative, got {self.minimum_bid}"
            )


@dataclass(frozen=True)
class Bid:
    id: str
    lot_id: str
    bidder_id: str
    amount: int  # centavos, > 0
    timestamp: datetime

    def __post_init__(self) -> None:
        if (
            not isinstance(self.amount, int)
            or isinstance(self.amount, bool)
            or self.amount <= 0
        ):
            raise InvalidBidAmountError(
                f"Bid amount must be a positive integer, got {self.amount!r}"
            )


@dataclass(frozen=True)
class AuctionState:
    id: str
    lot_id: str
    window: AuctionWindow
    current_highest_bid: int = 0
    bids: tuple[Bid, ...] = ()
    auction_number: str = ""

    @property
    def total_bids(self) -> int:
        return len(self.bids)

    @property
    def status(self) -> AuctionStatus:
        return self.window.status


@dataclass(frozen=True)
class BidRejection:
    """Why a bid was refused. Equal inputs produce equal rejections."""

    reason: BidRejectionReason
    message: str
    required_minimum: int | None = None

    def to_error(self) -> BidRejectedError:
        if self.reason is BidRejectionReason.AUCTION_NOT_ACTIVE:
            return AuctionNotActiveError(self.message)
        if self.reason is BidRejectionReason.BELOW_MINIMUM:
            return BidBelowMinimumError(self.message, self.required_minimum or 0)
        if self.reason is BidRejectionReason.BELOW_INCREMENT:
            return BidBelowIncrementError(self.message, self.required_minimum or 0)
        return InvalidBidAmountError(self.message)


@dataclass(frozen=True)
class ClosureResult:
    winning_bid: Bid | None
    final_status: AuctionStatus
    total_bids: int
