"""Pydantic request/response schemas used by the API.

Schemas keep API input/output shapes stable and provide validation for
controller handlers and tests.
"""

from pydantic import BaseModel, field_validator
from typing import Optional


class TutorialCreate(BaseModel):
    """Payload for creating a tutorial. `published` defaults to False."""
    title: Optional[str] = None
    description: Optional[str] = None
    published: bool = False


class TutorialUpdate(BaseModel):
    """Partial update payload.

    Only the fields present in the request body are applied. `title` and
    `description` may be set to null to clear them; `published` must be
    a boolean when given.
    """
    title: Optional[str] = None
    description: Optional[str] = None
    published: Optional[bool] = None

    @field_validator("published")
    @classmethod
    def published_not_null(cls, v):
        if v is None:
            raise ValueError("published must be true or false")
        return v


class TutorialRead(BaseModel):
    """Response shape for a single tutorial."""
    id: int
    title: Optional[str] = None
    description: Optional[str] = None
    published: bool

    model_config = {"from_attributes": True}


class MessageOut(BaseModel):
    """Confirmation returned by the single delete endpoint."""
    message: str


class DeleteAllOut(BaseModel):
    """Confirmation returned by delete-all with the number of removed rows."""
    message: str
    deleted: int
