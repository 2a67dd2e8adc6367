import logging
import time
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel

from src.cors_config import combine_regex_patterns, get_cors_settings
from src.formatter_service import (
    FormatError,
    NameFormatRequest,
    NameOnlyRequest,
    format_all,
    format_request,
    list_airlines,
)
from src.logging_setup import setup_logging
from src.security import RateLimiter

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Flight Name Formatter",
    description="Lays out a traveler's name the way each airline's booking form expects.",
    version="0.1.0",
)

explicit_origins, regex_origins = get_cors_settings()
allow_origin_regex = combine_regex_patterns(regex_origins)

app.add_middleware(
    CORSMiddleware,
    allow_origins=explicit_origins,
    allow_origin_regex=allow_origin_regex,
    allow_credentials=False,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

rate_limiter = RateLimiter.from_env()


@app.middleware("http")
async def add_timing_and_rate_limit(request: Request, call_next):
    client_host = request.client.host if request.client else "unknown"
    if not rate_limiter.allow_request(client_host, request.url.path):
        logger.warning("request budget exhausted", extra={"request_path": request.url.path, "client": client_host})
        return JSONResponse({"detail": "Too many requests"}, status_code=429)

    start = time.perf_counter()
    response: Response = await call_next(request)
    latency_ms = (time.perf_counter() - start) * 1000
    response.headers["X-Request-Latency-ms"] = f"{latency_ms:.2f}"
    response.headers["X-RateLimit-Remaining"] = str(rate_limiter.remaining(client_host))

    logger.info(
        "request",
        extra={
            "request_path": request.url.path,
            "method": request.method,
            "status_code": response.status_code,
            "latency_ms": round(latency_ms, 2),
            "client": client_host,
        },
    )
    return response


class AirlinePolicyResponse(BaseModel):
    key: str
    label: str
    drop_marker: bool
    duplicate_single: bool
    three_fields: bool
    no_spaces: bool


@app.get("/health")
async def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.get("/api/airlines", response_model=List[AirlinePolicyResponse])
async def get_airlines(
    query: Optional[str] = Query(
        default=None, description="Filter airlines by key or name substring."
    )
) -> List[Dict[str, Any]]:
    return list_airlines(query)


@app.post("/api/format")
async def format_name(payload: NameFormatRequest) -> Dict[str, Any]:
    try:
        result = format_request(payload)
    except FormatError as exc:
        raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc
    logger.debug("formatted name", extra={"airline": result["airline"]})
    return result


@app.post("/api/format/all")
async def format_name_all(payload: NameOnlyRequest) -> Dict[str, Any]:
    return format_all(payload)
