from typing import Tuple
from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.services.pdf_service import PdfService

# Registers the invoices table on SQLModel.metadata
from src.domain.invoice import Invoice  # noqa: F401


def create_storage(db_uri: str) -> Tuple[AsyncEngine, sessionmaker]:
    engine = create_async_engine(db_uri, echo=False, future=True)
    session_factory = sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )
    return engine, session_factory


async def init_storage(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def get_session(request: Request) -> AsyncSession:
    async with request.app.state.session_factory() as session:
        yield session


def get_pdf_service(request: Request) -> PdfService:
    return request.app.state.pdf_service
