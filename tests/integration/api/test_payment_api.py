"""Integration tests for Payment API endpoints"""

import pytest
from httpx import AsyncClient


class TestPaymentSimulationAPI:
    """POST /api/payment/simulate"""

    @pytest.mark.asyncio
    async def test_simulate_payment(self, client: AsyncClient):
        response = await client.post("/api/payment/simulate")

        assert response.status_code == 200
        data = response.json()
        assert data["ok"] is True
        assert data["status"] == "paid"
        assert data["provider"] == "simulation"
        assert data["ref"].startswith("sim-")
        assert data["ref"][4:].isdigit()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "kwargs",
        [
            {"json": {"amount": -100, "card": "declined"}},
            {"json": []},
            {"content": b"garbage", "headers": {"Content-Type": "application/json"}},
        ],
    )
    async def test_body_is_ignored(self, client: AsyncClient, kwargs):
        response = await client.post("/api/payment/simulate", **kwargs)

        assert response.status_code == 200
        assert response.json()["status"] == "paid"
