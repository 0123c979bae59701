"""PDF Generation Service Interface

Defines the contract for rendering invoice artifacts.
"""

from abc import ABC, abstractmethod
from src.domain.invoice import Invoice
from src.app.use_cases.invoices.dtos import RenderedInvoiceDTO


class PdfService(ABC):
    """
    Service interface for PDF generation

    Renders an invoice to durable storage and reports where it landed.
    """

    @abstractmethod
    async def render_invoice(self, invoice: Invoice) -> RenderedInvoiceDTO:
        """
        Render an invoice PDF

        Resolves only once the file is completely written.

        Args:
            invoice: Invoice with header fields and line items

        Returns:
            Location and public URL of the rendered PDF

        Raises:
            RenderError: the document could not be built or written
        """
        pass
