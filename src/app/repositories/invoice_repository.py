"""Invoice Repository Interface

Defines the contract for invoice persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List
from src.domain.invoice import Invoice


class InvoiceRepository(ABC):
    """
    Repository interface for Invoice persistence

    Append-only: invoices can be created and listed, never updated or deleted.
    """

    @abstractmethod
    async def create(self, invoice: Invoice) -> Invoice:
        """
        Create a new invoice record

        Args:
            invoice: Fully rendered Invoice entity to persist

        Returns:
            Persisted Invoice

        Raises:
            StoreError: duplicate id or storage failure
        """
        pass

    @abstractmethod
    async def list_recent(self, limit: int = 20) -> List[Invoice]:
        """
        Retrieve the most recently created invoices

        Args:
            limit: Maximum number of invoices to return

        Returns:
            Invoices ordered by created_at descending
        """
        pass
