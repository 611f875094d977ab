"""
Async database access helpers (raw SQL) using asyncpg.

This module owns the connection pool. FastAPI initializes it on startup and
closes it on shutdown (see `api/main.py`).

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...

Every driver-level failure is re-raised as `DatabaseError` so callers can
translate storage problems without importing asyncpg.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg

from core import settings

_pool: asyncpg.Pool | None = None

# TimeoutError (command_timeout) is an OSError subclass.
_DRIVER_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError)


class DatabaseError(RuntimeError):
    pass


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url() -> str:
    url = settings.env_str("DATABASE_URL", "")
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    return _sanitize_database_url(url)


async def init_pool() -> None:
    global _pool
    if _pool is not None:
        return None
    _pool = await asyncpg.create_pool(
        dsn=database_url(),
        min_size=settings.env_int("DB_POOL_MIN_SIZE", 1),
        max_size=settings.env_int("DB_POOL_MAX_SIZE", 5),
        command_timeout=settings.env_float("DB_COMMAND_TIMEOUT_S", 30.0),
    )


async def close_pool() -> None:
    global _pool
    if _pool is None:
        return None
    await _pool.close()
    _pool = None


def pool() -> asyncpg.Pool:
    if _pool is None:
        raise DatabaseError("DB pool is not initialized. Call init_pool() on startup.")
    return _pool


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


async def fetch_one(sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    try:
        row = await pool().fetchrow(sql, *args)
    except _DRIVER_ERRORS as exc:
        raise DatabaseError(f"fetch_one failed: {exc}") from exc
    return _record_to_dict(row) if row is not None else None


async def fetch_all(sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    try:
        rows = await pool().fetch(sql, *args)
    except _DRIVER_ERRORS as exc:
        raise DatabaseError(f"fetch_all failed: {exc}") from exc
    return [_record_to_dict(r) for r in rows]


async def fetch_value(sql: str, *args: Any) -> Any:
    """
    Run a query and return the first column of the first row (or None).

    Used when Postgres already produced the final value, e.g. a JSON
    document rendered with `json_agg(...)::text`.
    """
    try:
        return await pool().fetchval(sql, *args)
    except _DRIVER_ERRORS as exc:
        raise DatabaseError(f"fetch_value failed: {exc}") from exc
