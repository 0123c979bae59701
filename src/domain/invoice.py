"""Invoice Domain Entity

One generated invoice. Records are append-only: created once, never updated.
"""

import json
from typing import List, Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import Float, String, Text
from src.domain.base import BaseModel
from src.domain.line_item import LineItem


class Invoice(BaseModel, table=True):
    """
    Invoice - Rendered billing document and its stored record

    Domain Rules:
    - id is unique and time-derived
    - company_name and client_name are non-empty
    - items holds at least one line item
    - total is the sum of all line totals
    - pdf_path and pdf_url are set once the artifact has been rendered
    """

    __tablename__ = "invoices"
    __table_args__ = (
        Index('ix_invoices_created_at', 'created_at'),
    )

    id: str = Field(
        sa_column=Column(String(32), primary_key=True),
        description="Time-derived invoice identifier"
    )

    created_at: str = Field(
        sa_column=Column(String(40), nullable=False),
        description="Creation timestamp (ISO-8601, UTC)"
    )

    company_name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Issuing company"
    )

    client_name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Billed client"
    )

    items_json: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Line items serialized as a JSON array"
    )

    total: float = Field(
        sa_column=Column(Float, nullable=False),
        description="Sum of qty * price over all line items"
    )

    pdf_path: Optional[str] = Field(
        default=None,
        sa_column=Column(String(1024), nullable=False),
        description="Filesystem path of the rendered PDF"
    )

    pdf_url: Optional[str] = Field(
        default=None,
        sa_column=Column(String(1024), nullable=False),
        description="Public URL of the rendered PDF"
    )

    @property
    def line_items(self) -> List[LineItem]:
        return [LineItem.model_validate(record) for record in json.loads(self.items_json)]

    @staticmethod
    def serialize_items(items: List[LineItem]) -> str:
        return json.dumps([item.to_record() for item in items])

    @property
    def filename(self) -> str:
        return f"invoice-{self.id}.pdf"

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": "1718000000000",
                "created_at": "2024-06-10T06:13:20+00:00",
                "company_name": "Acme",
                "client_name": "Bob",
                "items_json": '[{"description": "Widget", "qty": 2.0, "price": 5.0}]',
                "total": 10.0,
                "pdf_path": "public/generated/invoice-1718000000000.pdf",
                "pdf_url": "/generated/invoice-1718000000000.pdf"
            }
        }
