"""Key-value storage table for persisted collections."""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar, Optional

from sqlalchemy import Column, Text
from sqlmodel import Field, SQLModel


class StoredValue(SQLModel, table=True):
    """A single serialized value addressed by a fixed key."""

    __tablename__: ClassVar[str] = "stored_value"

    key: str = Field(primary_key=True, max_length=64)
    value: str = Field(sa_column=Column(Text, nullable=False))
    updated_at: Optional[datetime] = Field(default=None)
