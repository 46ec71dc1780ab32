import logging
import random

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from .core.config import get_settings, Settings
from .core.logging import init_logging, request_context_middleware
from .core import errors
from .db.schema import init_db
from .routers import health, rates, send, auth, transactions, ads, dashboard
from .services.rates.quote_service import RateQuoteService
from .services.transactions import generate_transactions


def create_app(settings_override: Settings | None = None) -> FastAPI:
    """Application factory.

    settings_override: pass an already constructed Settings instance for tests
    to isolate environment (e.g., temp DB). Falls back to cached get_settings().
    """
    settings = settings_override or get_settings()
    settings.init_post_load()
    init_logging(debug=settings.debug)

    try:
        init_db(settings.db_path)  # type: ignore[arg-type]
    except Exception:
        logging.getLogger("wiremit").exception("failed to initialise database on startup")
        raise

    app = FastAPI(title=settings.app_name, debug=settings.debug, version=settings.version)
    app.state.settings = settings
    # Session-scoped state: one quote holder, one generated history per process
    app.state.quote_service = RateQuoteService.from_settings(settings)
    app.state.transactions = generate_transactions(
        settings.transactions_count, rng=random.Random(settings.transactions_seed)
    )

    app.middleware("http")(request_context_middleware)

    app.add_exception_handler(StarletteHTTPException, errors.http_error_handler)
    app.add_exception_handler(RequestValidationError, errors.validation_error_handler)
    app.add_exception_handler(errors.FormValidationError, errors.form_error_handler)
    app.add_exception_handler(Exception, errors.server_error_handler)

    app.include_router(health.router)
    app.include_router(rates.router)
    app.include_router(send.router)
    app.include_router(auth.router)
    app.include_router(transactions.router)
    app.include_router(ads.router)
    app.include_router(dashboard.router)

    @app.get("/")
    async def root():
        return {"message": "Wiremit API", "version": settings.version}

    return app
