"""
Process-wide logging configuration and the HTTP access log.
"""

from __future__ import annotations

import logging
import time

from fastapi import FastAPI, Request

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

access_logger = logging.getLogger("contacts.access")


def configure_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    # Reloads and repeated startups must not stack handlers.
    if any(getattr(h, "_contacts_handler", False) for h in root.handlers):
        return None
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._contacts_handler = True  # type: ignore[attr-defined]
    root.addHandler(handler)


def install_access_log(app: FastAPI) -> None:
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - started) * 1000
        access_logger.info(
            "request method=%s path=%s status=%s duration_ms=%.1f",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
        return response
