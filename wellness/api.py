# -*- coding: utf-8 -*-
"""
Wellness tracker API

Identity, owner-scoped wellness entries, summary/advice and exports.
"""

from __future__ import annotations

import logging
import time

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .app_db import init_app_db
from .auth.api import router as auth_router
from .config import settings
from .entries.api import router as entries_router
from .errors import ValidationError, WellnessError, describe_validation_errors

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Wellness Tracker",
    description="Daily steps, sleep and mood log with summaries and exports",
    version=__version__,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def _startup_init_db() -> None:
    init_app_db(settings.db_path)


@app.middleware("http")
async def _log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info("%s %s -> %s (%.1f ms)", request.method, request.url.path, response.status_code, elapsed_ms)
    return response


@app.exception_handler(WellnessError)
async def _wellness_error_handler(request: Request, exc: WellnessError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


@app.exception_handler(RequestValidationError)
async def _request_validation_handler(request: Request, exc: RequestValidationError):
    err = ValidationError(describe_validation_errors(exc.errors()))
    return JSONResponse(status_code=err.status_code, content=err.to_body())


@app.exception_handler(StarletteHTTPException)
async def _http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return JSONResponse(status_code=404, content={"error": "Route not found"})
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


@app.exception_handler(Exception)
async def _unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


app.include_router(auth_router)
app.include_router(entries_router)


@app.get("/api/health", tags=["Health"])
def health() -> dict:
    return {"status": "ok", "message": "Backend running"}


@app.get("/", include_in_schema=False)
def root() -> PlainTextResponse:
    return PlainTextResponse("Backend is running")
