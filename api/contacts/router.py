"""
Contacts API endpoints.
"""

from __future__ import annotations

from typing import Annotated

import asyncpg
from fastapi import APIRouter, Depends, Path, status
from fastapi.responses import PlainTextResponse

from core import db

from . import schemas, service

router = APIRouter(prefix="/contacts")

# contacts.id is a PostgreSQL integer (SERIAL).
ContactId = Annotated[int, Path(ge=1, le=2_147_483_647)]


@router.get("", response_model=list[schemas.ContactResponse])
async def list_contacts(pool: asyncpg.Pool = Depends(db.get_pool)) -> list[schemas.ContactResponse]:
    return await service.list_contacts(pool)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_class=PlainTextResponse,
)
async def create_contact(
    request: schemas.ContactCreate,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> PlainTextResponse:
    contact = await service.create_contact(pool, request)
    return PlainTextResponse(
        f"Contact added with ID: {contact.id}",
        status_code=status.HTTP_201_CREATED,
    )


@router.get("/{contact_id}", response_model=schemas.ContactResponse)
async def get_contact(
    contact_id: ContactId,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> schemas.ContactResponse:
    return await service.get_contact(pool, contact_id)


@router.put("/{contact_id}", response_class=PlainTextResponse)
async def update_contact(
    contact_id: ContactId,
    request: schemas.ContactUpdate,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> PlainTextResponse:
    await service.update_contact(pool, contact_id, request)
    return PlainTextResponse(f"Contact modified with ID: {contact_id}")


@router.delete("/{contact_id}", response_class=PlainTextResponse)
async def delete_contact(
    contact_id: ContactId,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> PlainTextResponse:
    await service.delete_contact(pool, contact_id)
    return PlainTextResponse(f"Contact deleted with ID: {contact_id}")
