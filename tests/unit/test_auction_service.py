"""Unit tests for AuctionApplicationService with in-memory repositories and a fixed clock."""

import asyncio
from datetime import UTC, datetime, timedelta
from decimal import Decimal

import pytest

from src.fa_auction.application.service import AuctionApplicationService
from src.fa_auction.domain.models import AuctionState
from src.fa_auction.infrastructure.persistence import InMemoryAuctionRepository
from src.fa_common.enums import AuctionStatus, LotStatus
from src.fa_common.errors import (
    AuctionAlreadyClosedError,
    AuctionAlreadyExistsError,
    AuctionNotActiveError,
    AuctionNotFoundError,
    AuctionNotStartableError,
    BidBelowIncrementError,
    BidBelowMinimumError,
    InvalidBidAmountError,
    LotNotAvailableError,
    LotNotFoundError,
)
from src.fa_lot.domain.models import Lot
from src.fa_lot.infrastructure.persistence import InMemoryLotRepository

NOW = datetime(2026, 3, 1, 4, 0, tzinfo=UTC)


class _Clock:
    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


class _YieldingAuctionRepository(InMemoryAuctionRepository):
    """Gives up the event loop between load and save, as a real store would."""

    async def get(self, auction_id: str) -> AuctionState | None:
        await asyncio.sleep(0)
        return await super().get(auction_id)

    async def save(self, auction: AuctionState) -> None:
        await asyncio.sleep(0)
        await super().save(auction)


@pytest.fixture
def clock() -> _Clock:
    return _Clock(NOW)


@pytest.fixture
def lot_repo() -> InMemoryLotRepository:
    return InMemoryLotRepository()


@pytest.fixture
def repo() -> InMemoryAuctionRepository:
    return InMemoryAuctionRepository()


@pytest.fixture
def svc(repo, lot_repo, clock) -> AuctionApplicationService:
    return AuctionApplicationService(repo=repo, lot_repo=lot_repo, clock=clock)


async def _seed_lot(lot_repo: InMemoryLotRepository, **kwargs) -> Lot:
    defaults = dict(
        id="lot-1", lot_number="LOT-20260301-001", supplier_id="sup-1",
        fish_type="Galunggong", weight_kg=Decimal("30"), reserve_price_cents=50000,
    )
    defaults.update(kwargs)
    lot = Lot(**defaults)
    await lot_repo.save(lot)
    return lot


async def _open_auction(svc: AuctionApplicationService, lot_repo, **kwargs) -> AuctionState:
    await _seed_lot(lot_repo)
    auction = await svc.schedule_auction("lot-1", **kwargs)
    return await svc.start_auction(auction.id)


class TestScheduleAuction:
    @pytest.mark.asyncio
    async def test_defaults_from_lot_and_settings(self, svc, lot_repo):
        await _seed_lot(lot_repo)

        auction = await svc.schedule_auction("lot-1")

        assert auction.status is AuctionStatus.SCHEDULED
        assert auction.window.minimum_bid == 40000  # 80% of 50000 reserve
        assert auction.window.bid_increment == 500
        assert auction.window.start_time == NOW
        assert auction.window.end_time == NOW + timedelta(hours=8)
        assert auction.auction_number.startswith("AUC-20260301-")
        lot = await lot_repo.get("lot-1")
        assert lot.status is LotStatus.IN_AUCTION

    @pytest.mark.asyncio
    async def test_explicit_parameters(self, svc, lot_repo):
        await _seed_lot(lot_repo)
        start = NOW + timedelta(hours=1)

        auction = await svc.schedule_auction(
            "lot-1", start_time=start, duration_minutes=30, minimum_bid=10000, bid_increment=250
        )

        assert auction.window.start_time == start
        assert auction.window.end_time == start + timedelta(minutes=30)
        assert auction.window.minimum_bid == 10000
        assert auction.window.bid_increment == 250

    @pytest.mark.asyncio
    async def test_unknown_lot(self, svc):
        with pytest.raises(LotNotFoundError):
            await svc.schedule_auction("lot-missing")

    @pytest.mark.asyncio
    async def test_second_auction_for_lot_rejected(self, svc, lot_repo):
        await _seed_lot(lot_repo)
        await svc.schedule_auction("lot-1")

        with pytest.raises(AuctionAlreadyExistsError):
            await svc.schedule_auction("lot-1")

    @pytest.mark.asyncio
    async def test_lot_must_be_available(self, svc, lot_repo):
        await _seed_lot(lot_repo, status=LotStatus.SOLD)

        with pytest.raises(LotNotAvailableError):
            await svc.schedule_auction("lot-1")


class TestStartAuction:
    @pytest.mark.asyncio
    async def test_opens(self, svc, lot_repo, repo):
        auction = await _open_auction(svc, lot_repo)
        assert auction.status is AuctionStatus.OPEN
        assert (await repo.get(auction.id)).status is AuctionStatus.OPEN

    @pytest.mark.asyncio
    async def test_before_start_time(self, svc, lot_repo):
        await _seed_lot(lot_repo)
        auction = await svc.schedule_auction("lot-1", start_time=NOW + timedelta(hours=1))

        with pytest.raises(AuctionNotStartableError):
            await svc.start_auction(auction.id)

    @pytest.mark.asyncio
    async def test_unknown_auction(self, svc):
        with pytest.raises(AuctionNotFoundError):
            await svc.start_auction("nope")


class TestPlaceBid:
    @pytest.mark.asyncio
    async def test_accepts_and_persists(self, svc, lot_repo, repo):
        auction = await _open_auction(svc, lot_repo, minimum_bid=10000)

        updated, bid = await svc.place_bid(auction.id, "buyer-A", 10000)

        assert bid.amount == 10000
        assert bid.lot_id == "lot-1"
        assert bid.timestamp == NOW
        assert bid.id.startswith("BID-20260301-")
        assert updated.current_highest_bid == 10000
        assert (await repo.get(auction.id)).total_bids == 1

    @pytest.mark.asyncio
    async def test_rejection_leaves_state_untouched(self, svc, lot_repo, repo):
        auction = await _open_auction(svc, lot_repo, minimum_bid=10000)
        await svc.place_bid(auction.id, "buyer-A", 12000)

        with pytest.raises(BidBelowIncrementError) as exc_info:
            await svc.place_bid(auction.id, "buyer-B", 12200)

        assert exc_info.value.required_minimum == 12500
        stored = await repo.get(auction.id)
        assert stored.total_bids == 1
        assert stored.current_highest_bid == 12000

    @pytest.mark.asyncio
    async def test_below_minimum_reports_required_amount(self, svc, lot_repo, repo):
        auction = await _open_auction(svc, lot_repo, minimum_bid=10000)

        with pytest.raises(BidBelowMinimumError) as exc_info:
            await svc.place_bid(auction.id, "buyer-A", 9999)

        assert exc_info.value.required_minimum == 10000
        assert (await repo.get(auction.id)).total_bids == 0

    @pytest.mark.asyncio
    async def test_non_positive_amount_rejected(self, svc, lot_repo, repo):
        auction = await _open_auction(svc, lot_repo, minimum_bid=0)

        with pytest.raises(InvalidBidAmountError):
            await svc.place_bid(auction.id, "buyer-A", -500)

        assert (await repo.get(auction.id)).total_bids == 0

    @pytest.mark.asyncio
    async def test_after_end_time_rejected(self, svc, lot_repo, clock):
        auction = await _open_auction(svc, lot_repo, duration_minutes=10)
        clock.now = NOW + timedelta(minutes=10, seconds=1)

        with pytest.raises(AuctionNotActiveError):
            await svc.place_bid(auction.id, "buyer-A", 100000)

    @pytest.mark.asyncio
    async def test_concurrent_equal_bids_only_one_wins(self, lot_repo, clock):
        repo = _YieldingAuctionRepository()
        svc = AuctionApplicationService(repo=repo, lot_repo=lot_repo, clock=clock)
        auction = await _open_auction(svc, lot_repo, minimum_bid=10000)

        results = await asyncio.gather(
            svc.place_bid(auction.id, "buyer-A", 15000),
            svc.place_bid(auction.id, "buyer-B", 15000),
            return_exceptions=True,
        )

        accepted = [r for r in results if not isinstance(r, Exception)]
        rejected = [r for r in results if isinstance(r, BidBelowIncrementError)]
        assert len(accepted) == 1
        assert len(rejected) == 1
        stored = await repo.get(auction.id)
        assert stored.total_bids == 1
        assert stored.current_highest_bid == 15000


class TestCloseAuction:
    @pytest.mark.asyncio
    async def test_with_winner(self, svc, lot_repo, repo, clock):
        auction = await _open_auction(svc, lot_repo, minimum_bid=10000)
        await svc.place_bid(auction.id, "buyer-A", 15000)
        clock.now = NOW + timedelta(minutes=1)
        await svc.place_bid(auction.id, "buyer-B", 16000)

        closed, result, lot = await svc.close_auction(auction.id)

        assert result.winning_bid.bidder_id == "buyer-B"
        assert result.total_bids == 2
        assert closed.status is AuctionStatus.CLOSED
        assert lot.status is LotStatus.PENDING_SUPPLIER_APPROVAL
        assert (await repo.get(auction.id)).status is AuctionStatus.CLOSED
        assert (await lot_repo.get("lot-1")).status is LotStatus.PENDING_SUPPLIER_APPROVAL

    @pytest.mark.asyncio
    async def test_unsold(self, svc, lot_repo):
        auction = await _open_auction(svc, lot_repo)

        _, result, lot = await svc.close_auction(auction.id)

        assert result.winning_bid is None
        assert result.total_bids == 0
        assert lot.status is LotStatus.UNSOLD

    @pytest.mark.asyncio
    async def test_close_twice_raises(self, svc, lot_repo):
        auction = await _open_auction(svc, lot_repo)
        await svc.close_auction(auction.id)

        with pytest.raises(AuctionAlreadyClosedError):
            await svc.close_auction(auction.id)

    @pytest.mark.asyncio
    async def test_bid_after_close_rejected(self, svc, lot_repo):
        auction = await _open_auction(svc, lot_repo)
        await svc.close_auction(auction.id)

        with pytest.raises(AuctionNotActiveError):
            await svc.place_bid(auction.id, "buyer-A", 100000)


class TestListOpenAuctions:
    @pytest.mark.asyncio
    async def test_only_open_and_not_ended(self, svc, lot_repo, clock):
        await _seed_lot(lot_repo, id="lot-1")
        await _seed_lot(lot_repo, id="lot-2")
        await _seed_lot(lot_repo, id="lot-3")
        open_long = await svc.schedule_auction("lot-1")
        await svc.start_auction(open_long.id)
        open_short = await svc.schedule_auction("lot-2", duration_minutes=5)
        await svc.start_auction(open_short.id)
        await svc.schedule_auction("lot-3")  # never started

        clock.now = NOW + timedelta(minutes=6)
        auctions = await svc.list_open_auctions()

        assert [a.id for a in auctions] == [open_long.id]
