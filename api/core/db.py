"""
Async database access helpers (raw SQL) using asyncpg.

The connection pool is owned by the FastAPI app: `main.py` creates it in the
lifespan, stores it on `app.state.pool`, and closes it on shutdown. Route
handlers receive it through the `get_pool` dependency and pass it down to
the repository.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any
from urllib.parse import parse_qsl, quote, urlencode, urlsplit, urlunsplit

import asyncpg
from fastapi import Request

from . import config
from .errors import PersistenceError

logger = logging.getLogger(__name__)

# Everything the driver or the network can throw at a query.
_DRIVER_ERRORS = (
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
    OSError,
    asyncio.TimeoutError,
)


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def _url_from_parts() -> str:
    user = config.env_str("USER_NAME", "postgres")
    password = config.env_str("PASSWORD", "")
    host = config.env_str("HOST", "localhost")
    port = config.env_int("PORT_DB", 5432)
    database = config.env_str("DATABASE", "contacts")

    credentials = quote(user, safe="")
    if password:
        credentials += ":" + quote(password, safe="")
    return f"postgresql://{credentials}@{host}:{port}/{database}"


def database_url() -> str:
    """
    `DATABASE_URL` wins; otherwise the DSN is assembled from the discrete
    USER_NAME / PASSWORD / HOST / PORT_DB / DATABASE variables.
    """
    url = config.env_str("DATABASE_URL", "")
    if url:
        return _sanitize_database_url(url)
    return _url_from_parts()


async def create_pool() -> asyncpg.Pool:
    try:
        pool = await asyncpg.create_pool(
            dsn=database_url(),
            min_size=config.env_int("DB_POOL_MIN_SIZE", 1),
            max_size=config.env_int("DB_POOL_MAX_SIZE", 10),
            command_timeout=config.env_int("DB_COMMAND_TIMEOUT", 30),
        )
    except _DRIVER_ERRORS as e:
        raise PersistenceError(str(e)) from e
    logger.info("db_pool_created")
    return pool


async def close_pool(pool: asyncpg.Pool | None) -> None:
    if pool is None:
        return None
    # Waits for checked-out connections to be released before closing.
    await pool.close()
    logger.info("db_pool_closed")


def get_pool(request: Request) -> asyncpg.Pool:
    """
    FastAPI dependency: the pool created at startup.
    """
    pool = getattr(request.app.state, "pool", None)
    if pool is None:
        raise PersistenceError("DB pool is not initialized.")
    return pool


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


async def fetch_one(pool: asyncpg.Pool, sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    try:
        row = await pool.fetchrow(sql, *args)
    except _DRIVER_ERRORS as e:
        raise PersistenceError(str(e)) from e
    return _record_to_dict(row) if row is not None else None


async def fetch_all(pool: asyncpg.Pool, sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    try:
        rows = await pool.fetch(sql, *args)
    except _DRIVER_ERRORS as e:
        raise PersistenceError(str(e)) from e
    return [_record_to_dict(r) for r in rows]


async def check_connection(pool: asyncpg.Pool) -> bool:
    try:
        row = await fetch_one(pool, "SELECT 1 AS ok")
    except PersistenceError:
        logger.warning("db_check_failed", exc_info=True)
        return False
    return row is not None
