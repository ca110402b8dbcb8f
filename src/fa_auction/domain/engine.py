"""Auction state engine — pure functions over AuctionState snapshots.

Nothing here performs I/O or keeps state between calls. Time-dependent
functions take an optional ``now``; when omitted, the current UTC time is used,
and a naive ``now`` is read as UTC.

Serializing concurrent bids on the same auction is the caller's job
(see AuctionApplicationService): add_bid takes a snapshot and returns a new
one, so two calls against the same stale snapshot would both pass validation.
"""

import logging
from dataclasses import replace
from datetime import datetime, timedelta

from src.fa_auction.domain.models import (
    AuctionState,
    AuctionWindow,
    Bid,
    BidRejection,
    ClosureResult,
)
from src.fa_common.datetime_utils import ensure_utc, utc_now
from src.fa_common.enums import AuctionStatus, BidRejectionReason
from src.fa_common.errors import (
    AuctionAlreadyClosedError,
    AuctionNotStartableError,
    AuctionNotStartedError,
)
from src.fa_common.money import format_money

logger = logging.getLogger(__name__)


def _resolve_now(now: datetime | None) -> datetime:
    return ensure_utc(now) if now is not None else utc_now()


# ---------------------------------------------------------------------------
# Activity window
# ---------------------------------------------------------------------------


def is_active(window: AuctionWindow, now: datetime | None = None) -> bool:
    """OPEN and start_time <= now <= end_time (both bounds count as active)."""
    now = _resolve_now(now)
    return (
        window.status is AuctionStatus.OPEN
        and window.start_time <= now <= window.end_time
    )


def has_ended(window: AuctionWindow, now: datetime | None = None) -> bool:
    """True once now is strictly past end_time, whatever the status says."""
    now = _resolve_now(now)
    return now > window.end_time


def can_start(window: AuctionWindow, now: datetime | None = None) -> bool:
    now = _resolve_now(now)
    return window.status is AuctionStatus.SCHEDULED and now >= window.start_time


def schedule_window(
    start_time: datetime,
    duration_minutes: int,
    minimum_bid: int,
    bid_increment: int,
) -> AuctionWindow:
    start_time = ensure_utc(start_time)
    return AuctionWindow(
        status=AuctionStatus.SCHEDULED,
        start_time=start_time,
        end_time=start_time + timedelta(minutes=duration_minutes),
        minimum_bid=minimum_bid,
        bid_increment=bid_increment,
    )


# ---------------------------------------------------------------------------
# Bids
# ---------------------------------------------------------------------------


def validate_bid(
    auction: AuctionState, amount: int, now: datetime | None = None
) -> BidRejection | None:
    """Return the first failing check as a BidRejection, or None if admissible.

    Order: active -> minimum -> increment -> positive integer.
    """
    window = auction.window
    if not is_active(window, now):
        return BidRejection(
            BidRejectionReason.AUCTION_NOT_ACTIVE, "Auction is not currently active"
        )

    if amount < window.minimum_bid:
        return BidRejection(
            BidRejectionReason.BELOW_MINIMUM,
            f"Bid must be at least {format_money(window.minimum_bid)}",
            required_minimum=window.minimum_bid,
        )

    required = auction.current_highest_bid + window.bid_increment
    if amount < required:
        return BidRejection(
            BidRejectionReason.BELOW_INCREMENT,
            f"Bid must be at least {format_money(required)} (current high + increment)",
            required_minimum=required,
        )

    if not isinstance(amount, int) or isinstance(amount, bool) or amount <= 0:
        return BidRejection(BidRejectionReason.INVALID_AMOUNT, "Invalid bid amount")

    return None


def next_minimum_bid(auction: AuctionState) -> int:
    if auction.current_highest_bid == 0:
        return auction.window.minimum_bid
    return auction.current_highest_bid + auction.window.bid_increment


def winning_bid(auction: AuctionState) -> Bid | None:
    """Highest amount wins; equal amounts go to the earliest timestamp."""
    if not auction.bids:
        return None
    return min(auction.bids, key=lambda b: (-b.amount, b.timestamp))


def add_bid(auction: AuctionState, bid: Bid, now: datetime | None = None) -> AuctionState:
    """Return a new snapshot with ``bid`` appended.

    Raises the BidRejectedError subclass matching the first failed check.
    """
    rejection = validate_bid(auction, bid.amount, now)
    if rejection is not None:
        logger.info(
            "Bid rejected: auction=%s bidder=%s amount=%s reason=%s",
            auction.auction_number or auction.id, bid.bidder_id, bid.amount,
            rejection.reason.value,
        )
        raise rejection.to_error()

    return replace(
        auction,
        bids=(*auction.bids, bid),
        current_highest_bid=max(auction.current_highest_bid, bid.amount),
    )


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------


def open_auction(auction: AuctionState, now: datetime | None = None) -> AuctionState:
    """SCHEDULED -> OPEN. Only allowed once can_start holds."""
    if not can_start(auction.window, now):
        raise AuctionNotStartableError(auction.id, auction.window.status.value)
    return replace(auction, window=replace(auction.window, status=AuctionStatus.OPEN))


def close_auction(auction: AuctionState) -> ClosureResult:
    """Resolve the winner of an OPEN auction. Does not change ``auction``.

    Closing twice is a caller error, not a no-op. Zero bids is a valid
    (unsold) outcome.
    """
    status = auction.window.status
    if status is AuctionStatus.CLOSED:
        raise AuctionAlreadyClosedError(auction.id)
    if status is AuctionStatus.SCHEDULED:
        raise AuctionNotStartedError(auction.id)

    return ClosureResult(
        winning_bid=winning_bid(auction),
        final_status=AuctionStatus.CLOSED,
        total_bids=auction.total_bids,
    )


def mark_closed(auction: AuctionState) -> AuctionState:
    """Snapshot with status CLOSED, for the caller to persist after close_auction."""
    return replace(auction, window=replace(auction.window, status=AuctionStatus.CLOSED))


# ---------------------------------------------------------------------------
# Display helpers
# ---------------------------------------------------------------------------


def auction_duration(start_time: datetime, end_time: datetime) -> int:
    """Whole minutes between start and end, floored."""
    return int((end_time - start_time).total_seconds() // 60)


def time_remaining(auction: AuctionState, now: datetime | None = None) -> timedelta:
    """end_time - now; negative once the auction has ended."""
    now = _resolve_now(now)
    return auction.window.end_time - now


def format_time_remaining(remaining: timedelta) -> str:
    """'1h 1m 5s' / '5m 30s' / '42s', or 'ENDED' when nothing is left."""
    if remaining <= timedelta(0):
        return "ENDED"

    total_seconds = int(remaining.total_seconds())
    hours, rest = divmod(total_seconds, 3600)
    minutes, seconds = divmod(rest, 60)

    if hours > 0:
        return f"{hours}h {minutes}m {seconds}s"
    if minutes > 0:
        return f"{minutes}m {seconds}s"
    return f"{seconds}s"
