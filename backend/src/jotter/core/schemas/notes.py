"""
Note schemas.

Create and update take the same body: both fields are required and must
be non-empty. Titles are trimmed, content is stored exactly as sent.

Note responses use the camelCase timestamp keys and `owner` that the web
client reads.
"""

import uuid
from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class NoteWrite(BaseModel):
    """Fields a caller supplies for a note."""

    title: str = Field(min_length=1, description="Note title")
    content: str = Field(min_length=1, description="Note content")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        # titles are stored trimmed
        v = v.strip()
        if not v:
            raise ValueError("Title cannot be empty")
        return v


class NoteCreate(NoteWrite):
    """Note creation request schema."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"title": "Groceries", "content": "Milk, eggs, coffee"}
        }
    )


class NoteUpdate(NoteWrite):
    """Note update request schema. Replaces title and content."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"title": "Groceries", "content": "Milk, eggs, coffee, bread"}
        }
    )


class NoteResponse(BaseModel):
    """Note response schema."""

    id: uuid.UUID = Field(description="Note unique identifier")
    # read from the ORM attribute names, written under the wire names
    owner: uuid.UUID = Field(
        validation_alias=AliasChoices("owner", "owner_id"),
        description="Account that owns the note",
    )
    title: str = Field(description="Note title")
    content: str = Field(description="Note content")
    created_at: datetime = Field(
        validation_alias=AliasChoices("createdAt", "created_at"),
        serialization_alias="createdAt",
        description="Creation timestamp",
    )
    updated_at: datetime = Field(
        validation_alias=AliasChoices("updatedAt", "updated_at"),
        serialization_alias="updatedAt",
        description="Last update timestamp",
    )

    model_config = ConfigDict(from_attributes=True)


class NoteDeleteResponse(BaseModel):
    msg: str = Field(default="Note removed")
    id: uuid.UUID
