"""SQLAlchemy Invoice Repository Implementation

Implements invoice persistence using SQLAlchemy async session.
"""

from typing import List
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.errors import StoreError
from src.domain.invoice import Invoice


class SqlAlchemyInvoiceRepository(InvoiceRepository):
    """
    SQLAlchemy implementation of InvoiceRepository

    Uses async session for database operations. The caller's unit of work
    commits the insert.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, invoice: Invoice) -> Invoice:
        """
        Create a new invoice record

        Args:
            invoice: Invoice entity to persist

        Returns:
            Persisted Invoice
        """
        self.session.add(invoice)
        try:
            await self.session.flush()
        except IntegrityError as e:
            raise StoreError(f"Invoice {invoice.id} already exists", cause=e) from e
        except SQLAlchemyError as e:
            raise StoreError("Failed to store invoice", cause=e) from e
        return invoice

    async def list_recent(self, limit: int = 20) -> List[Invoice]:
        """
        Retrieve the most recently created invoices

        Args:
            limit: Maximum number of invoices to return

        Returns:
            List of invoices, newest first
        """
        statement = (
            select(Invoice)
            .order_by(Invoice.created_at.desc(), Invoice.id.desc())
            .limit(limit)
        )
        try:
            result = await self.session.execute(statement)
        except SQLAlchemyError as e:
            raise StoreError("Failed to list invoices", cause=e) from e
        return list(result.scalars().all())
