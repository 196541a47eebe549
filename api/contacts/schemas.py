"""
Pydantic schemas for contact endpoints.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class ContactType(str, Enum):
    familiar_person = "familiar_person"
    companion = "companion"
    friend = "friend"
    best_friend = "best_friend"


class ContactCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    age: int = Field(..., ge=0, le=200)
    email: str = Field(..., min_length=3, max_length=320)
    phone: str = Field(..., min_length=1, max_length=50)
    type: ContactType = ContactType.familiar_person


class ContactUpdate(ContactCreate):
    """
    Full replace: every field, `type` included, must be sent.
    """

    type: ContactType


class ContactResponse(BaseModel):
    id: int
    name: str
    age: int
    email: str
    phone: str
    type: ContactType
