"""Payment API Routes

Simulated payment endpoint; no provider is called.
"""

from fastapi import APIRouter, status

from src.app.use_cases.invoices.dtos import PaymentSimulationResponseDTO
from src.app.use_cases.invoices.simulate_payment import SimulatePayment

router = APIRouter(prefix="/payment", tags=["Payments"])


@router.post(
    "/simulate",
    response_model=PaymentSimulationResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def simulate_payment():
    """
    Simulate a successful payment.

    The request body is ignored and the response always reports `paid`.
    """
    result = await SimulatePayment().execute()
    return result.value
