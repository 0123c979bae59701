"""FastAPI application factory"""

import logging
import os
from contextlib import asynccontextmanager

import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from src.adapter.services.pdf_service import ReportLabPdfService
from src.api.error import register_error_handlers
from src.api.middleware import RequestLoggingMiddleware
from src.api.routes import invoices, payments
from src.depends import create_storage, init_storage

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_storage(app.state.engine)
    logger.info(f"Invoice store ready at {app.state.config.DB_URI}")
    yield
    await app.state.engine.dispose()


def create_app(config) -> FastAPI:
    if config.ENABLE_SENTRY:
        sentry_sdk.init(dsn=config.DSN_SENTRY, environment=config.SENTRY_ENVIRONMENT)

    for directory in (config.PUBLIC_DIR, config.GENERATED_DIR, config.DATA_DIR):
        os.makedirs(directory, exist_ok=True)

    app = FastAPI(title="Invoice Prototype", lifespan=lifespan)

    engine, session_factory = create_storage(config.DB_URI)
    app.state.config = config
    app.state.engine = engine
    app.state.session_factory = session_factory
    app.state.pdf_service = ReportLabPdfService(
        output_dir=config.GENERATED_DIR,
        url_prefix=config.GENERATED_URL_PREFIX,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=config.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if config.ENABLE_LOGGING_MIDDLEWARE:
        app.add_middleware(RequestLoggingMiddleware)

    register_error_handlers(app)

    app.include_router(invoices.router, prefix=config.API_PREFIX)
    app.include_router(payments.router, prefix=config.API_PREFIX)

    app.mount(
        config.GENERATED_URL_PREFIX,
        StaticFiles(directory=config.GENERATED_DIR),
        name="generated",
    )
    app.mount("/", StaticFiles(directory=config.PUBLIC_DIR, html=True), name="public")

    return app
