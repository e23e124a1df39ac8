"""FastAPI application with lifespan and health endpoint."""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from gke_notifier.config import get_settings
from gke_notifier.logging_config import configure_logging
from gke_notifier.router import router as notifications_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: configure logging and load config on startup."""
    settings = get_settings()
    configure_logging(json_log=settings.json_log, level=settings.log_level)
    app.state.settings = settings
    yield


app = FastAPI(
    title="GKE Notifier",
    lifespan=lifespan,
)
app.include_router(notifications_router)


@app.get("/health")
async def health():
    """Health check endpoint for Cloud Run and local development."""
    return {
        "status": "ok",
        "service": "gke-notifier",
        "version": "0.1.0",
    }


def main() -> None:
    """Run the service with uvicorn on the configured host and port."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
