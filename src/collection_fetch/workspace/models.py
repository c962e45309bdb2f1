"""Collection models for the workspace listing response."""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Fork(BaseModel):
    """Fork metadata attached to a forked collection."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    label: Optional[str] = Field(default="", description="Branch name this fork represents; null is read as empty")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    from_uid: Optional[str] = Field(default=None, alias="from", description="uid the fork was made from")


class Collection(BaseModel):
    """One collection entry of a workspace.

    ``id`` is shared by a collection and all of its forks; ``uid`` is unique
    to this fork and is the handle used to download the document. Entries
    without fork metadata are canonical (root) collections.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(..., description="Stable identifier of the collection lineage")
    uid: str = Field(..., description="Identifier of this specific fork")
    name: str = Field(default="")
    owner: str = Field(default="")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")
    fork: Optional[Fork] = Field(default=None)
    is_public: bool = Field(default=False, alias="isPublic")

    @field_validator("uid")
    @classmethod
    def validate_uid_nonempty(cls, v: str) -> str:
        """Ensure uid is usable as a download handle."""
        if not v or not v.strip():
            raise ValueError("uid must not be empty")
        return v

    @property
    def fork_label(self) -> str:
        """Fork label, or empty string for the canonical collection."""
        if self.fork is None:
            return ""
        return self.fork.label or ""


class CollectionListing(BaseModel):
    """Body of ``GET /collections?workspace=<id>``."""

    collections: List[Collection] = Field(...)
