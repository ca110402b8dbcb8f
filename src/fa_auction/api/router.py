"""fa_auction REST endpoints.

POST /auctions                     — schedule an auction for a lot
GET  /auctions                     — open auctions that have not ended
GET  /auctions/{auction_id}        — snapshot with bids, next minimum, time left
POST /auctions/{auction_id}/start  — SCHEDULED -> OPEN
POST /auctions/{auction_id}/bids   — place a bid
POST /auctions/{auction_id}/close  — resolve the winner, CLOSED
"""

from fastapi import APIRouter, Request

from config.settings import settings
from src.fa_auction.application.schemas import (
    AuctionListResponse,
    AuctionResponse,
    BidOut,
    ClosureResponse,
    PlaceBidRequest,
    PlaceBidResponse,
    ScheduleAuctionRequest,
)
from src.fa_auction.application.service import AuctionApplicationService
from src.fa_common.response import ApiResponse, success_response

router = APIRouter(prefix="/auctions", tags=["auctions"])

_service = AuctionApplicationService()
_SYMBOL = settings.CURRENCY_SYMBOL


def _request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


@router.post("", status_code=201)
async def schedule_auction(req: ScheduleAuctionRequest, request: Request) -> ApiResponse:
    auction = await _service.schedule_auction(
        lot_id=req.lot_id,
        start_time=req.start_time,
        duration_minutes=req.duration_minutes,
        minimum_bid=req.minimum_bid_cents,
        bid_increment=req.bid_increment_cents,
    )
    result = AuctionResponse.from_domain(auction, _service.now(), _SYMBOL)
    return success_response(result.model_dump(), _request_id(request))


@router.get("")
async def list_open_auctions(request: Request) -> ApiResponse:
    auctions = await _service.list_open_auctions()
    now = _service.now()
    result = AuctionListResponse(
        items=[AuctionResponse.from_domain(a, now, _SYMBOL) for a in auctions]
    )
    return success_response(result.model_dump(), _request_id(request))


@router.get("/{auction_id}")
async def get_auction(auction_id: str, request: Request) -> ApiResponse:
    auction = await _service.get_auction(auction_id)
    result = AuctionResponse.from_domain(auction, _service.now(), _SYMBOL)
    return success_response(result.model_dump(), _request_id(request))


@router.post("/{auction_id}/start")
async def start_auction(auction_id: str, request: Request) -> ApiResponse:
    auction = await _service.start_auction(auction_id)
    result = AuctionResponse.from_domain(auction, _service.now(), _SYMBOL)
    return success_response(result.model_dump(), _request_id(request))


@router.post("/{auction_id}/bids", status_code=201)
async def place_bid(auction_id: str, req: PlaceBidRequest, request: Request) -> ApiResponse:
    auction, bid = await _service.place_bid(auction_id, req.bidder_id, req.resolved_amount())
    result = PlaceBidResponse(
        bid=BidOut.from_domain(bid, _SYMBOL),
        auction=AuctionResponse.from_domain(auction, _service.now(), _SYMBOL),
    )
    return success_response(result.model_dump(), _request_id(request))


@router.post("/{auction_id}/close")
async def close_auction(auction_id: str, request: Request) -> ApiResponse:
    auction, closure, lot = await _service.close_auction(auction_id)
    result = ClosureResponse.from_domain(closure, auction, lot, _service.now(), _SYMBOL)
    return success_response(result.model_dump(), _request_id(request))
