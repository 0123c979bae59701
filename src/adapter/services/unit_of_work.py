from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import StoreError


class SqlAlchemyUnitOfWork(UnitOfWork):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        try:
            await self.session.commit()
        except IntegrityError as e:
            raise StoreError("Invoice record violates a store constraint", cause=e) from e
        except SQLAlchemyError as e:
            raise StoreError("Failed to commit invoice record", cause=e) from e

    async def rollback(self):
        await self.session.rollback()
