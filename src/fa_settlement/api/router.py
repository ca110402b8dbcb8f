"""fa_settlement REST endpoints.

GET  /settlements/preview?gross_cents=  — commission / labor fee / net breakdown
POST /lots/{lot_id}/approve             — supplier accepts the winning bid
POST /lots/{lot_id}/reject              — supplier declines; lot back to AVAILABLE
GET  /lots/{lot_id}/settlements         — settlements recorded for a lot
"""

from fastapi import APIRouter, Query, Request

from config.settings import settings
from src.fa_common.response import ApiResponse, success_response
from src.fa_settlement.application.schemas import (
    ApproveSaleResponse,
    RejectSaleResponse,
    SettlementBreakdownOut,
    SettlementResponse,
)
from src.fa_settlement.application.service import SettlementApplicationService

router = APIRouter(tags=["settlements"])

_service = SettlementApplicationService()
_SYMBOL = settings.CURRENCY_SYMBOL


def _request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


@router.get("/settlements/preview")
async def preview_settlement(
    request: Request,
    gross_cents: int = Query(..., ge=0, description="Winning bid in centavos"),
) -> ApiResponse:
    breakdown = _service.preview(gross_cents)
    result = SettlementBreakdownOut.from_domain(breakdown, _SYMBOL)
    return success_response(result.model_dump(), _request_id(request))


@router.post("/lots/{lot_id}/approve")
async def approve_sale(lot_id: str, request: Request) -> ApiResponse:
    lot, settlement = await _service.approve_sale(lot_id)
    result = ApproveSaleResponse(
        lot_id=lot.id,
        lot_status=lot.status.value,
        settlement=SettlementResponse.from_domain(settlement, _SYMBOL),
    )
    return success_response(result.model_dump(), _request_id(request))


@router.post("/lots/{lot_id}/reject")
async def reject_sale(lot_id: str, request: Request) -> ApiResponse:
    lot = await _service.reject_sale(lot_id)
    return success_response(
        RejectSaleResponse.from_domain(lot).model_dump(), _request_id(request)
    )


@router.get("/lots/{lot_id}/settlements")
async def list_lot_settlements(lot_id: str, request: Request) -> ApiResponse:
    settlements = await _service.list_for_lot(lot_id)
    data = [SettlementResponse.from_domain(s, _SYMBOL).model_dump() for s in settlements]
    return success_response(data, _request_id(request))
