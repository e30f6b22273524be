from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from sentences.models.document import DocumentKind
from sentences.models.history import RevisionAction


class DocumentSnapshot(BaseModel):
    """Serialized document state stored in ``previous_data`` / ``new_data``."""

    model_config = ConfigDict(populate_by_name=True)

    file_name: str = Field(alias="fileName")
    kind: DocumentKind = Field(alias="type")
    free_text: str = Field(default="", alias="freeText")
    sentence_count: int = Field(default=0, ge=0, alias="sentenceCount")
    sentences: list[str] = Field(default_factory=list)


class RevisionResponse(BaseModel):

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    document_id: UUID
    file_name: str
    action: RevisionAction
    changed_at: datetime
    changed_by: str
    change_description: str
    previous_data: str | None = None
    new_data: str | None = None

    @property
    def has_changes(self) -> bool:
        return self.previous_data is not None and self.new_data is not None
