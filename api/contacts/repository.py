"""
Contact persistence (raw SQL).

One statement per operation, always parameter-bound. The pool is passed in
by the caller; this module holds no state.
"""

from __future__ import annotations

import asyncpg

from core import db


async def list_contacts(pool: asyncpg.Pool) -> list[dict]:
    return await db.fetch_all(
        pool,
        """
        SELECT id, name, age, email, phone, type
        FROM contacts
        ORDER BY id
        """,
    )


async def create_contact(
    pool: asyncpg.Pool,
    *,
    name: str,
    age: int,
    email: str,
    phone: str,
    contact_type: str,
) -> dict:
    row = await db.fetch_one(
        pool,
        """
        INSERT INTO contacts (name, age, email, phone, type)
        VALUES ($1, $2, $3, $4, $5)
        RETURNING id, name, age, email, phone, type
        """,
        name,
        age,
        email,
        phone,
        contact_type,
    )
    if row is None:
        raise RuntimeError("Failed to insert contact.")
    return row


async def get_contact(pool: asyncpg.Pool, contact_id: int) -> dict | None:
    return await db.fetch_one(
        pool,
        """
        SELECT id, name, age, email, phone, type
        FROM contacts
        WHERE id = $1
        """,
        contact_id,
    )


async def update_contact(
    pool: asyncpg.Pool,
    contact_id: int,
    *,
    name: str,
    age: int,
    email: str,
    phone: str,
    contact_type: str,
) -> dict | None:
    """
    Replace every mutable column. Returns None when no row has `contact_id`.
    """
    return await db.fetch_one(
        pool,
        """
        UPDATE contacts
        SET name = $1,
            age = $2,
            email = $3,
            phone = $4,
            type = $5
        WHERE id = $6
        RETURNING id, name, age, email, phone, type
        """,
        name,
        age,
        email,
        phone,
        contact_type,
        contact_id,
    )


async def delete_contact(pool: asyncpg.Pool, contact_id: int) -> bool:
    row = await db.fetch_one(
        pool,
        """
        DELETE FROM contacts
        WHERE id = $1
        RETURNING id
        """,
        contact_id,
    )
    return row is not None
