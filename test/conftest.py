"""
Pytest configuration and shared fixtures.
"""
from __future__ import annotations

from collections.abc import AsyncGenerator, Callable, Iterable
from datetime import datetime, timedelta, timezone
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from campaign_vouchers.main import app
from campaign_vouchers.models.campaign import Campaign
from campaign_vouchers.schemas.campaign import CampaignCreate
from campaign_vouchers.services.campaign_service import CampaignRegistry
from campaign_vouchers.services.voucher_service import VoucherEngine
from campaign_vouchers.store import build_store, get_engine, get_registry


# ---------------------------------------------------------------------------
# Store fixtures: a fresh registry/engine pair per test
# ---------------------------------------------------------------------------


@pytest.fixture
def store() -> tuple[CampaignRegistry, VoucherEngine]:
    return build_store()


@pytest.fixture
def registry(store: tuple[CampaignRegistry, VoucherEngine]) -> CampaignRegistry:
    return store[0]


@pytest.fixture
def engine(store: tuple[CampaignRegistry, VoucherEngine]) -> VoucherEngine:
    return store[1]


@pytest.fixture
def campaign_payload() -> dict[str, Any]:
    """Campaign body as the API receives it."""
    valid_from = datetime.now(timezone.utc)
    return {
        "name": "Test",
        "validFrom": valid_from.isoformat(),
        "validTo": (valid_from + timedelta(hours=1)).isoformat(),
        "amount": 100,
        "currency": "SEK",
        "prefix": "TEST",
    }


@pytest.fixture
def make_campaign(
    registry: CampaignRegistry,
    campaign_payload: dict[str, Any],
) -> Callable[..., Campaign]:
    """Register a campaign, overriding payload fields by keyword."""

    def _make(**overrides: Any) -> Campaign:
        data = {**campaign_payload, **overrides}
        return registry.create_campaign(CampaignCreate.model_validate(data))

    return _make


@pytest.fixture
def scripted_randbelow() -> Callable[[Iterable[int]], Callable[[int], int]]:
    """Build a random source replaying fixed values instead of drawing."""

    def _build(values: Iterable[int]) -> Callable[[int], int]:
        it = iter(values)

        def _randbelow(upper: int) -> int:
            return next(it)

        return _randbelow

    return _build


# ---------------------------------------------------------------------------
# HTTP client bound to the per-test store
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def async_client(
    registry: CampaignRegistry,
    engine: VoucherEngine,
) -> AsyncGenerator[AsyncClient, None]:
    app.dependency_overrides[get_registry] = lambda: registry
    app.dependency_overrides[get_engine] = lambda: engine

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
