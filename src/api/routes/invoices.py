"""Invoice API Routes

FastAPI routes for invoice generation and listing.
"""

from typing import Any
from fastapi import APIRouter, Depends, Query, Request, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.services.pdf_service import PdfService
from src.app.use_cases.invoices.dtos import (
    GenerateInvoiceResponseDTO,
    ListInvoicesResponseDTO,
)
from src.app.use_cases.invoices.generate_invoice import GenerateInvoice
from src.app.use_cases.invoices.list_invoices import ListInvoices, DEFAULT_LIMIT
from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session, get_pdf_service
from src.api.error import ClientError

router = APIRouter(tags=["Invoices"])

_ERROR_RESPONSE = {
    "application/json": {
        "example": {"ok": False, "error": "at least one valid item required"}
    }
}


async def _read_json_body(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError:
        return {}


@router.post(
    "/generate",
    response_model=GenerateInvoiceResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"description": "Invalid invoice payload", "content": _ERROR_RESPONSE},
        500: {"description": "Rendering or storing failed", "content": _ERROR_RESPONSE},
    },
)
async def generate_invoice(
    request: Request,
    session: AsyncSession = Depends(get_session),
    pdf_service: PdfService = Depends(get_pdf_service),
):
    """
    Generate an invoice PDF and record it.

    **Request body:**
    - `companyName` (required): Issuing company
    - `clientName` (required): Billed client
    - `items` (required): List of `{description, qty, price}`; invalid entries are dropped

    **Example request:**
    ```json
    {
      "companyName": "Acme",
      "clientName": "Bob",
      "items": [{"description": "Widget", "qty": 2, "price": 5}]
    }
    ```

    **Returns:**
    - 200: `{ok, id, url, total}`
    - 400: Missing names or no valid line item
    - 500: PDF could not be written or the record could not be stored
    """
    payload = await _read_json_body(request)

    uow = SqlAlchemyUnitOfWork(session)
    invoice_repo = SqlAlchemyInvoiceRepository(session)

    use_case = GenerateInvoice(uow, invoice_repo, pdf_service)
    result = await use_case.execute(payload)

    if result.is_err():
        if result.error.code == "VALIDATION_ERROR":
            raise ClientError(result.error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ClientError(result.error, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return result.value


@router.get(
    "/invoices",
    response_model=ListInvoicesResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def list_invoices(
    limit: int = Query(default=DEFAULT_LIMIT, ge=1, le=DEFAULT_LIMIT),
    session: AsyncSession = Depends(get_session),
):
    """
    List recently generated invoices, newest first.

    **Query parameters:**
    - `limit` (optional): Number of invoices, 1-20 (default 20)
    """
    use_case = ListInvoices(SqlAlchemyInvoiceRepository(session))
    result = await use_case.execute(limit=limit)

    if result.is_err():
        raise ClientError(result.error, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return result.value
