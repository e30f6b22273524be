from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from sentences.models.document import DocumentKind


class SentenceResponse(BaseModel):

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    document_id: UUID
    text: str
    order: int = Field(ge=0)
    created_at: datetime


class DocumentDraft(BaseModel):
    """
    Editor state handed to the service on save.

    ``sentences`` is the candidate list exactly as presented to the editor,
    blanks included; cleaning happens on save.
    """

    file_name: str = Field(default="", max_length=255)
    kind: DocumentKind = DocumentKind.ITEMS
    sentences: list[str] = Field(default_factory=list)
    free_text: str | None = None

    def cleaned_sentences(self) -> list[str]:
        return [text.strip() for text in self.sentences if text.strip()]

    def cleaned_free_text(self) -> str:
        return (self.free_text or "").strip()

    def has_valid_content(self) -> bool:
        if self.kind is DocumentKind.ITEMS:
            return bool(self.cleaned_sentences())
        return bool(self.cleaned_free_text())


class DocumentResponse(BaseModel):

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    file_name: str
    kind: DocumentKind
    free_text: str | None = None
    created_at: datetime
    created_by: str
    last_updated_at: datetime
    updated_by: str
    sentences: list[SentenceResponse] = Field(default_factory=list)
