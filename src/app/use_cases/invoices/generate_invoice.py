"""GenerateInvoice Use Case

Validates an invoice payload, renders the PDF and stores the invoice record.
"""

import logging
from datetime import datetime, timezone
from typing import Any
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.pdf_service import PdfService
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.base import generate_invoice_id
from src.domain.errors import ValidationError, RenderError, StoreError
from src.domain.invoice import Invoice
from src.domain.line_item import total_of
from .dtos import GenerateInvoiceResponseDTO
from .normalize import normalize_invoice_payload

logger = logging.getLogger(__name__)


class GenerateInvoice:
    """
    Use Case: Generate invoice PDF and record

    Business Rules:
    1. Payload must carry both names and at least one valid line item
    2. Invalid line items are dropped, not rejected
    3. total is the sum of qty * price over the kept items
    4. Exactly one render followed by one persist; nothing is retried
    5. A failed persist leaves the rendered PDF in place

    Flow:
    1. Normalize payload
    2. Build invoice with a fresh id and timestamp
    3. Render PDF
    4. Persist invoice record and commit
    5. Return id, url and total
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        pdf_service: PdfService,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.pdf_service = pdf_service

    async def execute(self, payload: Any) -> Result[GenerateInvoiceResponseDTO]:
        """
        Execute invoice generation

        Args:
            payload: Raw request body

        Returns:
            Result[GenerateInvoiceResponseDTO]: Success with id/url/total or error
        """
        # Step 1: Normalize payload
        try:
            command = normalize_invoice_payload(payload)
        except ValidationError as e:
            logger.info(f"Rejected invoice payload: {e.message}")
            return Return.err(
                Error(code=e.code, message=e.message, reason="Invalid invoice payload")
            )

        # Step 2: Build invoice
        invoice = Invoice(
            id=generate_invoice_id(),
            created_at=datetime.now(timezone.utc).isoformat(timespec="microseconds"),
            company_name=command.company_name,
            client_name=command.client_name,
            items_json=Invoice.serialize_items(command.items),
            total=total_of(command.items),
        )

        try:
            # Step 3: Render PDF
            rendered = await self.pdf_service.render_invoice(invoice)
            invoice.pdf_path = rendered.path
            invoice.pdf_url = rendered.url

            # Step 4: Persist and commit
            await self.invoice_repo.create(invoice)
            await self.uow.commit()

        except RenderError as e:
            logger.error(f"Rendering invoice {invoice.id} failed: {e.cause or e}")
            return Return.err(
                Error(code=e.code, message=e.message, reason=str(e.cause or e))
            )

        except StoreError as e:
            await self.uow.rollback()
            logger.error(f"Storing invoice {invoice.id} failed: {e.cause or e}")
            logger.warning(f"Orphaned invoice artifact left at {invoice.pdf_path}")
            return Return.err(
                Error(code=e.code, message=e.message, reason=str(e.cause or e))
            )

        except Exception as e:
            await self.uow.rollback()
            logger.exception(f"Generating invoice {invoice.id} failed")
            return Return.err(
                Error(
                    code="GENERATE_INVOICE_FAILED",
                    message="Failed to generate invoice",
                    reason=str(e),
                )
            )

        logger.info(
            f"Generated invoice {invoice.id} for {invoice.client_name} "
            f"({len(command.items)} items, total {invoice.total:.2f})"
        )

        # Step 5: Build response
        return Return.ok(
            GenerateInvoiceResponseDTO(
                id=invoice.id,
                url=invoice.pdf_url,
                total=invoice.total,
            )
        )
