"""SQLModel data models."""

from typing import Optional
from sqlalchemy import Text
from sqlmodel import SQLModel, Field


class Tutorial(SQLModel, table=True):
    """A tutorial record.

    `id` is assigned by the database on insert and never changes.
    `published` defaults to False when a record is created without it.
    """
    __tablename__ = "tutorials"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: Optional[str] = Field(default=None, sa_type=Text)
    description: Optional[str] = Field(default=None, sa_type=Text)
    published: bool = Field(default=False, nullable=False)
