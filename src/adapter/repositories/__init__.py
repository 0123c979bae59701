from .invoice_repository import SqlAlchemyInvoiceRepository

__all__ = [
    "SqlAlchemyInvoiceRepository",
]
