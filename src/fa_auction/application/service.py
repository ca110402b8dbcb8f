"""AuctionApplicationService — orchestration around the pure auction engine.

Every state change for one auction runs under that auction's asyncio.Lock:
load snapshot -> engine call -> save snapshot. This is what keeps two
concurrent bids from both validating against the same stale highest bid.
"""

import asyncio
import logging
from collections import defaultdict
from collections.abc import Callable
from datetime import datetime

from config.settings import settings
from src.fa_auction.domain import engine
from src.fa_auction.domain.models import AuctionState, Bid, ClosureResult
from src.fa_auction.domain.repository import AuctionRepositoryProtocol
from src.fa_auction.infrastructure.persistence import auction_repository
from src.fa_common.datetime_utils import ensure_utc, utc_now
from src.fa_common.enums import AuctionStatus
from src.fa_common.errors import AuctionAlreadyExistsError, AuctionNotFoundError, LotNotFoundError
from src.fa_common.id_generator import generate_id, next_business_number
from src.fa_lot.domain import lifecycle
from src.fa_lot.domain.models import Lot
from src.fa_lot.domain.repository import LotRepositoryProtocol
from src.fa_lot.infrastructure.persistence import lot_repository

logger = logging.getLogger(__name__)


class AuctionApplicationService:
    def __init__(
        self,
        repo: AuctionRepositoryProtocol | None = None,
        lot_repo: LotRepositoryProtocol | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._repo: AuctionRepositoryProtocol = repo or auction_repository
        self._lot_repo: LotRepositoryProtocol = lot_repo or lot_repository
        self._clock = clock
        self._auction_locks: dict[str, asyncio.Lock] = defaultdict(asyncio.Lock)

    def now(self) -> datetime:
        return self._clock()

    async def _load(self, auction_id: str) -> AuctionState:
        auction = await self._repo.get(auction_id)
        if auction is None:
            raise AuctionNotFoundError(auction_id)
        return auction

    async def _load_lot(self, lot_id: str) -> Lot:
        lot = await self._lot_repo.get(lot_id)
        if lot is None:
            raise LotNotFoundError(lot_id)
        return lot

    async def schedule_auction(
        self,
        lot_id: str,
        start_time: datetime | None = None,
        duration_minutes: int | None = None,
        minimum_bid: int | None = None,
        bid_increment: int | None = None,
    ) -> AuctionState:
        """Create a SCHEDULED auction for an AVAILABLE lot and move the lot IN_AUCTION."""
        lot = await self._load_lot(lot_id)

        in_progress = [
            a for a in await self._repo.find_by_lot(lot_id)
            if a.status is not AuctionStatus.CLOSED
        ]
        if in_progress:
            raise AuctionAlreadyExistsError(lot_id)

        lot = lifecycle.begin_auction(lot)

        now = self.now()
        if minimum_bid is None:
            minimum_bid = lifecycle.starting_price(
                lot, settings.START_PRICE_RESERVE_PCT, settings.START_PRICE_PER_KG_CENTS
            )
        window = engine.schedule_window(
            start_time=ensure_utc(start_time) if start_time else now,
            duration_minutes=duration_minutes or settings.AUCTION_DURATION_MINUTES,
            minimum_bid=minimum_bid,
            bid_increment=bid_increment or settings.DEFAULT_BID_INCREMENT_CENTS,
        )
        auction = AuctionState(
            id=generate_id(),
            lot_id=lot_id,
            window=window,
            auction_number=next_business_number("AUC", now),
        )
        await self._repo.save(auction)
        await self._lot_repo.save(lot)
        logger.info(
            "Auction scheduled: %s lot=%s start=%s end=%s min=%d inc=%d",
            auction.auction_number, lot.lot_number, window.start_time.isoformat(),
            window.end_time.isoformat(), window.minimum_bid, window.bid_increment,
        )
        return auction

    async def start_auction(self, auction_id: str) -> AuctionState:
        async with self._auction_locks[auction_id]:
            auction = await self._load(auction_id)
            opened = engine.open_auction(auction, self.now())
            await self._repo.save(opened)
        logger.info("Auction opened: %s", opened.auction_number)
        return opened

    async def place_bid(
        self, auction_id: str, bidder_id: str, amount: int
    ) -> tuple[AuctionState, Bid]:
        """Validate and append a bid. Raises a BidRejectedError subclass on rejection."""
        async with self._auction_locks[auction_id]:
            auction = await self._load(auction_id)
            now = self.now()
            bid = Bid(
                id=next_business_number("BID", now),
                lot_id=auction.lot_id,
                bidder_id=bidder_id,
                amount=amount,
                timestamp=now,
            )
            updated = engine.add_bid(auction, bid, now)
            await self._repo.save(updated)

        logger.info(
            "Bid accepted: auction=%s bid=%s bidder=%s amount=%d total_bids=%d",
            updated.auction_number, bid.id, bidder_id, amount, updated.total_bids,
        )
        return updated, bid

    async def close_auction(self, auction_id: str) -> tuple[AuctionState, ClosureResult, Lot]:
        """Resolve the winner, persist CLOSED and move the lot to approval or UNSOLD."""
        async with self._auction_locks[auction_id]:
            auction = await self._load(auction_id)
            result = engine.close_auction(auction)
            closed = engine.mark_closed(auction)

            lot = await self._load_lot(auction.lot_id)
            lot = lifecycle.finish_auction(lot, has_winner=result.winning_bid is not None)

            await self._repo.save(closed)
            await self._lot_repo.save(lot)

        if result.winning_bid is None:
            logger.info("Auction closed unsold: %s", closed.auction_number)
        else:
            logger.info(
                "Auction closed: %s winner=%s amount=%d bids=%d",
                closed.auction_number, result.winning_bid.bidder_id,
                result.winning_bid.amount, result.total_bids,
            )
        return closed, result, lot

    async def get_auction(self, auction_id: str) -> AuctionState:
        return await self._load(auction_id)

    async def list_open_auctions(self) -> list[AuctionState]:
        """OPEN auctions whose end time has not passed yet, newest start first."""
        now = self.now()
        auctions = [
            a for a in await self._repo.list_all()
            if a.status is AuctionStatus.OPEN and not engine.has_ended(a.window, now)
        ]
        return sorted(auctions, key=lambda a: a.window.start_time, reverse=True)
