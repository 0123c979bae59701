"""
List Invoices Use Case

Retrieves the most recently generated invoices.
"""
import logging
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.errors import StoreError
from .dtos import ListInvoicesResponseDTO, InvoiceSummaryDTO

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 20


class ListInvoices:
    """
    Use case: View recent invoices

    Invoices are ordered by created_at DESC (most recent first) and projected
    without their line items.
    """

    def __init__(self, invoice_repo: InvoiceRepository):
        """
        Initialize with invoice repository.

        Args:
            invoice_repo: InvoiceRepository instance
        """
        self.invoice_repo = invoice_repo

    async def execute(self, limit: int = DEFAULT_LIMIT) -> Result[ListInvoicesResponseDTO]:
        """
        List recent invoices.

        Args:
            limit: Maximum number of invoices to return (default 20)

        Returns:
            Result[ListInvoicesResponseDTO]: Newest invoices first
        """
        try:
            invoices = await self.invoice_repo.list_recent(limit=limit)
        except StoreError as e:
            logger.error(f"Listing invoices failed: {e.cause or e}")
            return Return.err(
                Error(code="LIST_INVOICES_FAILED", message=e.message, reason=str(e.cause or e))
            )

        summaries = [
            InvoiceSummaryDTO(
                id=invoice.id,
                created_at=invoice.created_at,
                company_name=invoice.company_name,
                client_name=invoice.client_name,
                total=invoice.total,
                pdf_url=invoice.pdf_url,
            )
            for invoice in invoices
        ]

        return Return.ok(ListInvoicesResponseDTO(invoices=summaries))
