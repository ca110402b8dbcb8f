"""Shared test fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient

from src.fa_auction.infrastructure.persistence import auction_repository
from src.fa_common.id_generator import reset_business_numbers
from src.fa_lot.infrastructure.persistence import lot_repository
from src.fa_settlement.infrastructure.persistence import settlement_repository
from src.main import app


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client for testing FastAPI endpoints."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def clean_store() -> None:
    """Empty the module-level in-memory repositories the routers share."""
    auction_repository.clear()
    lot_repository.clear()
    settlement_repository.clear()
    reset_business_numbers()
