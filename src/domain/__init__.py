from .base import BaseModel, generate_invoice_id
from .errors import InvoiceError, ValidationError, RenderError, StoreError
from .line_item import LineItem, total_of
from .invoice import Invoice

__all__ = [
    "BaseModel",
    "generate_invoice_id",
    "InvoiceError",
    "ValidationError",
    "RenderError",
    "StoreError",
    "LineItem",
    "total_of",
    "Invoice",
]
