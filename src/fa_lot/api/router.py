"""fa_lot REST endpoints.

POST /lots            — register a catch lot
GET  /lots/{lot_id}   — lot detail
"""

from fastapi import APIRouter, Request

from config.settings import settings
from src.fa_common.response import ApiResponse, success_response
from src.fa_lot.application.schemas import CreateLotRequest, LotResponse
from src.fa_lot.application.service import LotApplicationService

router = APIRouter(prefix="/lots", tags=["lots"])

_service = LotApplicationService()


@router.post("", status_code=201)
async def create_lot(req: CreateLotRequest, request: Request) -> ApiResponse:
    lot = await _service.create_lot(
        supplier_id=req.supplier_id,
        fish_type=req.fish_type,
        weight_kg=req.weight_kg,
        reserve_price_cents=req.reserve_price_cents,
    )
    result = LotResponse.from_domain(lot, settings.CURRENCY_SYMBOL)
    return success_response(result.model_dump(), getattr(request.state, "request_id", None))


@router.get("/{lot_id}")
async def get_lot(lot_id: str, request: Request) -> ApiResponse:
    lot = await _service.get_lot(lot_id)
    result = LotResponse.from_domain(lot, settings.CURRENCY_SYMBOL)
    return success_response(result.model_dump(), getattr(request.state, "request_id", None))
