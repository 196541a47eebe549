"""Shared fixtures — in-memory stand-in for the asyncpg pool + FastAPI test client.

The fake pool understands exactly the statements issued by
`contacts/repository.py` and `core/db.py`, keyed on the leading SQL verb,
and records every call so tests can assert on parameter binding.
"""

import re

import pytest
from httpx import ASGITransport, AsyncClient

from core import db
from main import app


def _normalize(sql: str) -> str:
    return re.sub(r"\s+", " ", sql).strip()


class FakePool:
    """Mimics `asyncpg.Pool.fetch` / `fetchrow` against an in-memory table."""

    def __init__(self):
        self.rows: dict[int, dict] = {}
        self.next_id = 1
        self.calls: list[tuple[str, tuple]] = []
        self.error: Exception | None = None

    def _run(self, sql: str, args: tuple) -> list[dict]:
        sql = _normalize(sql)
        self.calls.append((sql, args))
        if self.error is not None:
            raise self.error

        if sql == "SELECT 1 AS ok":
            return [{"ok": 1}]
        if sql.startswith("SELECT") and "WHERE id = $1" in sql:
            row = self.rows.get(args[0])
            return [dict(row)] if row else []
        if sql.startswith("SELECT"):
            return [dict(self.rows[k]) for k in sorted(self.rows)]
        if sql.startswith("INSERT"):
            name, age, email, phone, contact_type = args
            row = {
                "id": self.next_id,
                "name": name,
                "age": age,
                "email": email,
                "phone": phone,
                "type": contact_type,
            }
            self.rows[self.next_id] = row
            self.next_id += 1
            return [dict(row)]
        if sql.startswith("UPDATE"):
            name, age, email, phone, contact_type, contact_id = args
            row = self.rows.get(contact_id)
            if row is None:
                return []
            row.update(name=name, age=age, email=email, phone=phone, type=contact_type)
            return [dict(row)]
        if sql.startswith("DELETE"):
            row = self.rows.pop(args[0], None)
            return [{"id": row["id"]}] if row else []
        raise AssertionError(f"unexpected SQL: {sql}")

    async def fetch(self, sql, *args):
        return self._run(sql, args)

    async def fetchrow(self, sql, *args):
        rows = self._run(sql, args)
        return rows[0] if rows else None


@pytest.fixture
def fake_pool():
    return FakePool()


@pytest.fixture
async def client(fake_pool):
    """FastAPI test client with the pool dependency pointed at the fake."""
    app.dependency_overrides[db.get_pool] = lambda: fake_pool
    app.state.pool = fake_pool

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    app.state.pool = None
