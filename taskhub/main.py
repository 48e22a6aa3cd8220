"""FastAPI application entry point for the taskhub service."""
from __future__ import annotations

import time
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from prometheus_client import Counter, Histogram, generate_latest
from sqlalchemy.exc import SQLAlchemyError

from taskhub.api import api_router
from taskhub.db.session import engine
from taskhub.errors import TaskNotFoundError
from taskhub.logging_setup import configure_logging
from taskhub.realtime import TaskBroadcaster
from taskhub.settings import settings

configure_logging(level=settings.log_level, json_logs=settings.is_production)
logger = structlog.get_logger(__name__)

REQUEST_COUNT = Counter("api_requests_total", "Total number of API requests", ["method", "endpoint", "status"])
REQUEST_LATENCY = Histogram("api_request_latency_seconds", "Latency of API requests", ["endpoint"])


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("startup", service=settings.service_name, environment=settings.environment)
    yield
    await app.state.broadcaster.close()
    await engine.dispose()
    logger.info("shutdown", service=settings.service_name)


app = FastAPI(title="Taskhub API", version="0.1.0", lifespan=lifespan)
app.state.broadcaster = TaskBroadcaster()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(api_router)


@app.middleware("http")
async def metrics_middleware(request: Request, call_next):  # type: ignore[override]
    start = time.perf_counter()
    response = await call_next(request)
    elapsed = time.perf_counter() - start
    route = request.scope.get("route")
    endpoint = getattr(route, "path", request.url.path)
    REQUEST_LATENCY.labels(endpoint=endpoint).observe(elapsed)
    REQUEST_COUNT.labels(method=request.method, endpoint=endpoint, status=response.status_code).inc()
    return response


@app.get("/healthz", include_in_schema=False)
async def healthcheck() -> dict:
    return {"status": "ok", "service": settings.service_name, "environment": settings.environment}


@app.get("/metrics", include_in_schema=False)
async def metrics() -> PlainTextResponse:
    return PlainTextResponse(generate_latest().decode("utf-8"), media_type="text/plain")


@app.exception_handler(TaskNotFoundError)
async def task_not_found_handler(_: Request, exc: TaskNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(_: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Database error", error=str(exc))
    return JSONResponse(status_code=500, content={"detail": "Database error"})


@app.exception_handler(Exception)
async def unhandled_exception_handler(_: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception", error=str(exc))
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def run() -> None:
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level)


if __name__ == "__main__":
    run()
