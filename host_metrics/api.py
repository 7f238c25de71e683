"""FastAPI application exposing host metrics reports."""
from __future__ import annotations

import datetime as dt
import logging
import time
from typing import Any, Awaitable, Callable, Dict, Optional

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from ._version import __version__
from .config import Settings, get_settings
from .metrics import SystemReport, collect_report, network_section, system_section, uptime_section

Collector = Callable[[Settings], Awaitable[SystemReport]]

ENDPOINTS = {
    "health": "/health",
    "metrics": "/api/metrics",
    "system": "/api/metrics/system",
    "uptime": "/api/metrics/uptime",
    "network": "/api/metrics/network",
}


def _timestamp() -> str:
    return dt.datetime.now(dt.timezone.utc).isoformat()


def create_app(settings: Optional[Settings] = None, collector: Collector = collect_report) -> FastAPI:
    settings = settings or get_settings()
    started = time.monotonic()

    app = FastAPI(
        title="Host Metrics Service",
        description="Reports CPU, memory, disk, uptime and network statistics of the host.",
        version=__version__,
    )

    async def respond(select: Callable[[SystemReport], Dict[str, Any]]):
        try:
            report = await collector(settings)
        except Exception as exc:  # pylint: disable=broad-except
            logging.error("Failed to collect metrics: %s", exc)
            return JSONResponse(
                status_code=500,
                content={"success": False, "error": str(exc) or exc.__class__.__name__, "timestamp": _timestamp()},
            )
        return {"success": True, "timestamp": _timestamp(), "data": select(report)}

    @app.get("/", summary="List the service endpoints", tags=["meta"])
    async def root():
        return {
            "message": "Host Metrics Service",
            "version": __version__,
            "endpoints": ENDPOINTS,
            "timestamp": _timestamp(),
        }

    @app.get("/health", summary="Service health check", tags=["meta"])
    async def health():
        return {
            "status": "ok",
            "timestamp": _timestamp(),
            "uptime": round(time.monotonic() - started, 2),
        }

    @app.get("/api/metrics", summary="Full host metrics report", tags=["metrics"])
    async def metrics():
        return await respond(SystemReport.to_dict)

    @app.get("/api/metrics/system", summary="CPU, memory, disk and process metrics", tags=["metrics"])
    async def system_metrics():
        return await respond(system_section)

    @app.get("/api/metrics/uptime", summary="System and process uptime", tags=["metrics"])
    async def uptime_metrics():
        return await respond(uptime_section)

    @app.get("/api/metrics/network", summary="Network interfaces and bandwidth totals", tags=["metrics"])
    async def network_metrics():
        return await respond(network_section)

    return app


app = create_app()
