"""
Directory Gateway - Main Application
Relays group, member, user and profile requests to Supabase
"""

import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException
import structlog

from directory_gateway import __version__
from directory_gateway.routes import build_router, health
from directory_gateway.utils.config import get_config
from directory_gateway.utils.logger import setup_logging
from directory_gateway.utils.supabase_client import SupabaseClient

config = get_config()
setup_logging(config.log_level, config.log_format)

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan events"""
    logger.info("Starting Directory Gateway")
    config.log_config()

    app.state.supabase = SupabaseClient.from_config(config)

    yield

    logger.info("Directory Gateway shutdown complete")


app = FastAPI(
    title="Directory Gateway",
    description="REST gateway for groups, members, users and user profiles backed by Supabase",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.get_cors_origins(),
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every request with its outcome and duration"""
    start = time.perf_counter()
    response = await call_next(request)
    logger.info(
        "Request completed",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        duration_ms=round((time.perf_counter() - start) * 1000, 2),
        client_ip=request.client.host if request.client else "unknown"
    )
    return response


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Render every HTTP error as {"error": <message>}"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None)
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning("Invalid request", method=request.method, path=request.url.path)
    return JSONResponse(
        status_code=422,
        content={"error": "Invalid request", "details": jsonable_encoder(exc.errors())}
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler"""
    logger.error(
        "Unhandled exception",
        error=str(exc),
        method=request.method,
        path=request.url.path,
        exc_info=True
    )
    return JSONResponse(status_code=500, content={"error": "Internal Server Error"})


app.include_router(health.router, tags=["Health"])
app.include_router(build_router())


def run():
    """Serve the application with uvicorn"""
    import uvicorn
    uvicorn.run(
        "directory_gateway.main:app",
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower()
    )


if __name__ == "__main__":
    run()
