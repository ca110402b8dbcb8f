"""FastAPI application entry point.

Run with: uvicorn src.main:app --reload --port 8000
"""

# ruff: noqa: E402  -- uvloop.install() must run before other imports

import uvloop

uvloop.install()

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config.settings import settings
from src.fa_auction.api.router import router as auction_router
from src.fa_common.errors import AppError
from src.fa_common.response import error_response
from src.fa_gateway.middleware.request_log import RequestLogMiddleware
from src.fa_lot.api.router import router as lot_router
from src.fa_settlement.api.router import router as settlement_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    debug=settings.DEBUG,
)


app.add_middleware(RequestLogMiddleware)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.http_status >= 500:
        logger.error("AppError %d on %s: %s", exc.code, request.url.path, exc.message)
    resp = error_response(exc.code, exc.message, getattr(request.state, "request_id", None))
    content = resp.model_dump()
    required_minimum = getattr(exc, "required_minimum", None)
    if required_minimum is not None:
        content["data"] = {"required_minimum_cents": required_minimum}
    return JSONResponse(
        status_code=exc.http_status,
        content=content,
    )


app.include_router(lot_router, prefix="/api/v1")
app.include_router(auction_router, prefix="/api/v1")
app.include_router(settlement_router, prefix="/api/v1")


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok", "version": "0.1.0"}
