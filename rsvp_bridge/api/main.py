import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from rsvp_bridge import __version__
from rsvp_bridge.api.routers import guests
from rsvp_bridge.api.schemas import HealthStatus
from rsvp_bridge.guests.errors import GuestDataError
from rsvp_bridge.sheets.client import (
    READ_ERROR_MESSAGE,
    WRITE_ERROR_MESSAGE,
    StoreReadError,
    StoreWriteError,
)

logger = logging.getLogger(__name__)


app = FastAPI(title="RSVP Bridge API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StoreReadError)
async def store_read_error_handler(request: Request, exc: StoreReadError) -> JSONResponse:
    logger.error(f"{request.url.path}: {exc}")
    return JSONResponse(status_code=502, content={"message": READ_ERROR_MESSAGE})


@app.exception_handler(StoreWriteError)
async def store_write_error_handler(request: Request, exc: StoreWriteError) -> JSONResponse:
    logger.error(f"{request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"message": WRITE_ERROR_MESSAGE})


@app.exception_handler(GuestDataError)
async def guest_data_error_handler(request: Request, exc: GuestDataError) -> JSONResponse:
    logger.warning(f"{request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"message": READ_ERROR_MESSAGE})


@app.get("/health")
async def health_check() -> HealthStatus:
    """Return health status of the API."""
    return HealthStatus(status="healthy", version=__version__)


app.include_router(guests.router)
