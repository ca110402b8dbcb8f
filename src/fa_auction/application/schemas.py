"""Pydantic schemas for fa_auction API requests/responses.

Amounts are always exposed as integer centavos (``*_cents``) plus a
``*_display`` string for UI use.
"""

from datetime import datetime

from pydantic import BaseModel, Field, model_validator

from src.fa_auction.domain import engine
from src.fa_auction.domain.models import AuctionState, Bid, ClosureResult
from src.fa_common.money import format_money, parse_money_string
from src.fa_lot.domain.models import Lot

# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


class ScheduleAuctionRequest(BaseModel):
    lot_id: str = Field(..., min_length=1)
    start_time: datetime | None = None
    duration_minutes: int | None = Field(None, ge=1)
    minimum_bid_cents: int | None = Field(None, ge=0)
    bid_increment_cents: int | None = Field(None, gt=0)


class PlaceBidRequest(BaseModel):
    """Bid amount as integer centavos, or as a peso string such as '₱125.00'."""

    bidder_id: str = Field(..., min_length=1)
    amount_cents: int | None = None
    amount: str | None = None

    @model_validator(mode="after")
    def _exactly_one_amount(self) -> "PlaceBidRequest":
        if (self.amount_cents is None) == (self.amount is None):
            raise ValueError("Provide exactly one of amount_cents or amount")
        return self

    def resolved_amount(self) -> int:
        if self.amount_cents is not None:
            return self.amount_cents
        return parse_money_string(self.amount or "")


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


class BidOut(BaseModel):
    id: str
    lot_id: str
    bidder_id: str
    amount_cents: int
    amount_display: str
    timestamp: str

    @classmethod
    def from_domain(cls, bid: Bid, symbol: str = "₱") -> "BidOut":
        return cls(
            id=bid.id,
            lot_id=bid.lot_id,
            bidder_id=bid.bidder_id,
            amount_cents=bid.amount,
            amount_display=format_money(bid.amount, symbol),
            timestamp=bid.timestamp.isoformat(),
        )


class AuctionResponse(BaseModel):
    id: str
    auction_number: str
    lot_id: str
    status: str
    start_time: str
    end_time: str
    duration_minutes: int
    minimum_bid_cents: int
    bid_increment_cents: int
    current_highest_bid_cents: int
    current_highest_bid_display: str
    next_minimum_bid_cents: int
    next_minimum_bid_display: str
    total_bids: int
    is_active: bool
    has_ended: bool
    time_remaining_seconds: int
    time_remaining_display: str
    bids: list[BidOut]

    @classmethod
    def from_domain(
        cls, auction: AuctionState, now: datetime, symbol: str = "₱"
    ) -> "AuctionResponse":
        w = auction.window
        remaining = engine.time_remaining(auction, now)
        next_min = engine.next_minimum_bid(auction)
        # Highest first, ties by earliest: the order the winner is picked in
        ordered = sorted(auction.bids, key=lambda b: (-b.amount, b.timestamp))
        return cls(
            id=auction.id,
            auction_number=auction.auction_number,
            lot_id=auction.lot_id,
            status=w.status.value,
            start_time=w.start_time.isoformat(),
            end_time=w.end_time.isoformat(),
            duration_minutes=engine.auction_duration(w.start_time, w.end_time),
            minimum_bid_cents=w.minimum_bid,
            bid_increment_cents=w.bid_increment,
            current_highest_bid_cents=auction.current_highest_bid,
            current_highest_bid_display=format_money(auction.current_highest_bid, symbol),
            next_minimum_bid_cents=next_min,
            next_minimum_bid_display=format_money(next_min, symbol),
            total_bids=auction.total_bids,
            is_active=engine.is_active(w, now),
            has_ended=engine.has_ended(w, now),
            time_remaining_seconds=int(remaining.total_seconds()),
            time_remaining_display=engine.format_time_remaining(remaining),
            bids=[BidOut.from_domain(b, symbol) for b in ordered],
        )


class PlaceBidResponse(BaseModel):
    bid: BidOut
    auction: AuctionResponse


class ClosureResponse(BaseModel):
    winning_bid: BidOut | None
    final_status: str
    total_bids: int
    lot_status: str
    auction: AuctionResponse

    @classmethod
    def from_domain(
        cls,
        result: ClosureResult,
        auction: AuctionState,
        lot: Lot,
        now: datetime,
        symbol: str = "₱",
    ) -> "ClosureResponse":
        return cls(
            winning_bid=(
                BidOut.from_domain(result.winning_bid, symbol) if result.winning_bid else None
            ),
            final_status=result.final_status.value,
            total_bids=result.total_bids,
            lot_status=lot.status.value,
            auction=AuctionResponse.from_domain(auction, now, symbol),
        )


class AuctionListResponse(BaseModel):
    items: list[AuctionResponse]
