"""Data Transfer Objects for Invoice Use Cases

Pydantic models for command inputs and response outputs.
"""

from typing import List
from pydantic import BaseModel, Field

from src.domain.line_item import LineItem


class NormalizedInvoiceDTO(BaseModel):
    """
    Cleaned invoice input

    Produced by the normalizer; guaranteed to carry non-empty names and at
    least one valid line item.
    """

    company_name: str = Field(..., min_length=1)
    client_name: str = Field(..., min_length=1)
    items: List[LineItem] = Field(..., min_length=1)


class RenderedInvoiceDTO(BaseModel):
    """Location of a rendered invoice PDF"""

    path: str = Field(..., description="Filesystem path of the PDF")
    url: str = Field(..., description="Public URL of the PDF")


class GenerateInvoiceResponseDTO(BaseModel):
    """
    Response DTO for invoice generation

    Returned by POST /api/generate.
    """

    ok: bool = True
    id: str
    url: str
    total: float

    class Config:
        json_schema_extra = {
            "example": {
                "ok": True,
                "id": "1718000000000",
                "url": "/generated/invoice-1718000000000.pdf",
                "total": 10.0,
            }
        }


class InvoiceSummaryDTO(BaseModel):
    """Listing projection of a stored invoice (line items excluded)"""

    id: str
    created_at: str
    company_name: str
    client_name: str
    total: float
    pdf_url: str


class ListInvoicesResponseDTO(BaseModel):
    """
    Response DTO for invoice listing

    Invoices are ordered newest first.
    """

    ok: bool = True
    invoices: List[InvoiceSummaryDTO]


class PaymentSimulationResponseDTO(BaseModel):
    """Canned payment result; no provider is ever contacted"""

    ok: bool = True
    status: str = "paid"
    provider: str = "simulation"
    ref: str

    class Config:
        json_schema_extra = {
            "example": {
                "ok": True,
                "status": "paid",
                "provider": "simulation",
                "ref": "sim-1718000000000",
            }
        }
