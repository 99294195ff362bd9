# main.py

"""FastAPI application serving restaurant menus with scheduled discounts."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import get_settings

from .middlewares import RequestIdMiddleware
from .obs.logging import configure_logging
from .routes_menu import router as menu_router
from .routes_scheduled_discounts import router as scheduled_discounts_router
from .utils.responses import err, validation_details

settings = get_settings()
configure_logging(settings.log_level.upper())
logger = logging.getLogger("carta")

app = FastAPI(title="Carta")
app.add_middleware(RequestIdMiddleware)

app.include_router(scheduled_discounts_router)
app.include_router(menu_router)


@app.get("/health")
def health() -> dict:
    return {"ok": True}


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    logger.warning(
        exc.detail,
        extra={"status": exc.status_code, "route": request.url.path},
    )
    return JSONResponse(err(exc.status_code, exc.detail), status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.info(
        "invalid payload",
        extra={"status": 422, "route": request.url.path},
    )
    return JSONResponse(
        err("VALIDATION", "Invalid payload", details=validation_details(exc.errors())),
        status_code=422,
    )


@app.exception_handler(Exception)
async def general_error_handler(request: Request, exc: Exception):
    logger.exception(
        "unhandled_error",
        extra={"status": 500, "route": request.url.path},
    )
    return JSONResponse(err(500, "Internal Server Error"), status_code=500)
