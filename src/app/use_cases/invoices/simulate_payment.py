"""SimulatePayment Use Case

Stand-in for a payment provider: always reports the payment as settled.
"""

import logging
from time import time_ns
from libs.result import Result, Return
from .dtos import PaymentSimulationResponseDTO

logger = logging.getLogger(__name__)


class SimulatePayment:
    """
    Use Case: Simulate a payment

    No provider is contacted and no state changes. The reference embeds the
    current time in milliseconds.
    """

    async def execute(self) -> Result[PaymentSimulationResponseDTO]:
        ref = f"sim-{time_ns() // 1_000_000}"
        logger.info(f"Simulated payment {ref}")
        return Return.ok(PaymentSimulationResponseDTO(ref=ref))
