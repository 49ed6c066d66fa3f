# FastAPI entry point; wires the store, CORS and the ingestion routes
# analytics/main.py
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from analytics.endpoints import log as log_router
from analytics.services.store import LogStore
from analytics.utils.config import settings
from analytics.utils.db import open_store
from analytics.utils.logger import logger, resolve_log_level


def _format_validation_error(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        loc = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{loc}: {error['msg']}" if loc else error["msg"])
    return "; ".join(messages) or "invalid request body"


def create_app(store: LogStore | None = None) -> FastAPI:
    """
    Builds the application. When no store is given, one is opened from
    settings at startup (falling back to degraded mode on failure).
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Analytics API starting up...")
        app.state.store = store if store is not None else open_store(settings.store_config())
        if not app.state.store.available:
            logger.warning("Running in degraded mode: events will not be persisted.")
        yield
        logger.info("Analytics API shutting down...")
        app.state.store.close()

    app = FastAPI(
        title="Analytics API",
        description="Ingestion endpoint for frontend analytics events.",
        version="0.1.0",
        lifespan=lifespan,
    )

    # --- CORS Middleware ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["POST", "GET", "OPTIONS"],
        allow_headers=["Origin", "Content-Type", "Content-Length"],
        expose_headers=["Content-Length"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.info(f"Rejected request to {request.url.path}: {exc.errors()}")
        return JSONResponse(status_code=400, content={"error": _format_validation_error(exc)})

    # --- Health Check ---
    @app.get("/health")
    async def health(request: Request):
        status = "ok" if request.app.state.store.available else "db_down"
        return {"status": status}

    # --- API Routers ---
    app.include_router(log_router.router)

    return app


app = create_app()


def run():
    """Console entry point: serves the app on the configured port."""
    logger.info(f"Analytics server starting on port {settings.port}")
    # uvicorn exits the process if the port cannot be bound
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=resolve_log_level(settings.log_level))


if __name__ == "__main__":
    run()
