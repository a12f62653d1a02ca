"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.config import settings
from app.db import init_db
from app.errors import DeviceUnavailable, EntityNotFound, LendingError
from routers import devices

ERROR_STATUS = {
    EntityNotFound: status.HTTP_404_NOT_FOUND,
    DeviceUnavailable: status.HTTP_400_BAD_REQUEST,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not settings.skip_db_init:
        init_db()
    yield


def create_application() -> FastAPI:
    """Create and configure the FastAPI application."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app = FastAPI(title=settings.app_name, version=settings.app_version, lifespan=lifespan)

    @app.exception_handler(LendingError)
    async def lending_error_handler(request: Request, exc: LendingError) -> JSONResponse:
        status_code = ERROR_STATUS.get(type(exc), status.HTTP_400_BAD_REQUEST)
        return JSONResponse(status_code=status_code, content={"detail": exc.message})

    app.include_router(devices.router, prefix="/devices", tags=["devices"])

    @app.get("/")
    def root():
        return {"ok": True, "service": "device-lending-api"}

    return app


app = create_application()
