"""
Contact business logic.

Maps repository results onto HTTP semantics: a missing row on get, update or
delete is a 404 rather than a silent success.
"""

from __future__ import annotations

import logging

import asyncpg
from fastapi import HTTPException, status

from core.errors import PersistenceError

from . import repository, schemas

logger = logging.getLogger(__name__)


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Contact not found.",
    )


def _to_response(row: dict) -> schemas.ContactResponse:
    try:
        contact_type = schemas.ContactType(str(row["type"]))
    except ValueError as e:
        raise PersistenceError(f"Stored contact {row['id']} has unknown type: {row['type']!r}") from e
    return schemas.ContactResponse(
        id=int(row["id"]),
        name=str(row["name"]),
        age=int(row["age"]),
        email=str(row["email"]),
        phone=str(row["phone"]),
        type=contact_type,
    )


async def list_contacts(pool: asyncpg.Pool) -> list[schemas.ContactResponse]:
    rows = await repository.list_contacts(pool)
    return [_to_response(row) for row in rows]


async def create_contact(pool: asyncpg.Pool, payload: schemas.ContactCreate) -> schemas.ContactResponse:
    row = await repository.create_contact(
        pool,
        name=payload.name,
        age=payload.age,
        email=payload.email,
        phone=payload.phone,
        contact_type=payload.type.value,
    )
    logger.info("contact_created id=%s type=%s", row["id"], row["type"])
    return _to_response(row)


async def get_contact(pool: asyncpg.Pool, contact_id: int) -> schemas.ContactResponse:
    row = await repository.get_contact(pool, contact_id)
    if row is None:
        raise _not_found()
    return _to_response(row)


async def update_contact(
    pool: asyncpg.Pool,
    contact_id: int,
    payload: schemas.ContactUpdate,
) -> schemas.ContactResponse:
    row = await repository.update_contact(
        pool,
        contact_id,
        name=payload.name,
        age=payload.age,
        email=payload.email,
        phone=payload.phone,
        contact_type=payload.type.value,
    )
    if row is None:
        logger.info("contact_update_missed id=%s", contact_id)
        raise _not_found()
    logger.info("contact_modified id=%s", contact_id)
    return _to_response(row)


async def delete_contact(pool: asyncpg.Pool, contact_id: int) -> None:
    deleted = await repository.delete_contact(pool, contact_id)
    if not deleted:
        logger.info("contact_delete_missed id=%s", contact_id)
        raise _not_found()
    logger.info("contact_deleted id=%s", contact_id)
