from __future__ import annotations
import logging
from datetime import date, datetime
from typing import Sequence
from uuid import UUID

from sentences.config import settings
from sentences.db.base import day_bounds, local_now
from sentences.exceptions import (
    ContentKindChangeError,
    DocumentNotFoundError,
    DocumentValidationError,
    DuplicateFileNameError,
    EmptyContentError,
    EmptyFileNameError,
)
from sentences.models import Document, DocumentKind, Sentence
from sentences.repositories.base import DocumentRepository
from sentences.schemas.document import DocumentDraft
from sentences.services.history_service import HistoryService

logger = logging.getLogger(__name__)


class DocumentService:

    MAX_NAME_ATTEMPTS = 1000

    def __init__(
        self,
        repository: DocumentRepository,
        history: HistoryService | None = None,
    ) -> None:
        self.repository = repository
        self.history = history or HistoryService(repository)

    @staticmethod
    def replace_sentences(document: Document, texts: Sequence[str]) -> list[Sentence]:
        """
        Rebuild a document's sentences from edited texts.

        Blank texts are dropped, the rest are trimmed and numbered 0..N-1.
        The whole collection is replaced, so previous sentence ids are gone.
        """
        cleaned = [text.strip() for text in texts if text.strip()]
        document.sentences = [
            Sentence.new(text, order) for order, text in enumerate(cleaned)
        ]
        for sentence in document.sentences:
            sentence.document_id = document.id
        return document.sentences

    @classmethod
    def apply_content(cls, document: Document, draft: DocumentDraft) -> None:
        # Only the form matching the document's kind survives.
        if document.kind is DocumentKind.ITEMS:
            cls.replace_sentences(document, draft.sentences)
            document.free_text = None
        else:
            document.free_text = draft.cleaned_free_text()
            if document.sentences:
                document.sentences = []

    async def validate(self, draft: DocumentDraft, excluding: UUID | None = None) -> None:
        if not draft.file_name.strip():
            raise EmptyFileNameError()
        if not draft.has_valid_content():
            raise EmptyContentError()
        if not await self.repository.is_file_name_unique(draft.file_name, excluding=excluding):
            raise DuplicateFileNameError(draft.file_name)

    async def get_document(self, document_id: UUID) -> Document | None:
        return await self.repository.fetch_by_id(document_id)

    async def get_document_or_raise(self, document_id: UUID) -> Document:
        document = await self.repository.fetch_by_id(document_id)
        if document is None:
            raise DocumentNotFoundError(document_id)
        return document

    async def list_documents(self) -> Sequence[Document]:
        return await self.repository.fetch_all()

    async def create_document(
        self, draft: DocumentDraft, actor: str | None = None
    ) -> Document:
        actor = actor or settings.default_actor
        await self.validate(draft)

        document = Document.new(draft.file_name, draft.kind, actor)
        self.apply_content(document, draft)

        await self.repository.create(
            document, self.history.created_entry(document, actor)
        )
        return document

    async def update_document(
        self, document_id: UUID, draft: DocumentDraft, actor: str | None = None
    ) -> Document:
        actor = actor or settings.default_actor
        document = await self.get_document_or_raise(document_id)
        if draft.kind is not document.kind:
            raise ContentKindChangeError(document.kind.value, draft.kind.value)
        await self.validate(draft, excluding=document.id)

        previous_data = self.history.snapshot(document)

        document.file_name = draft.file_name
        document.last_updated_at = local_now()
        document.updated_by = actor
        self.apply_content(document, draft)

        await self.repository.update(
            document, self.history.updated_entry(document, previous_data, actor)
        )
        return document

    async def delete_document(self, document_id: UUID, actor: str | None = None) -> bool:
        actor = actor or settings.default_actor
        document = await self.repository.fetch_by_id(document_id)
        if document is None:
            logger.debug(f"Delete requested for missing document {document_id}")
            return False

        await self.repository.delete(
            document, self.history.deleted_entry(document, actor)
        )
        return True

    async def generate_default_file_name(self, today: date | datetime | None = None) -> str:
        """
        Suggest a name like ``2025-01-01_03`` for a new document.

        The suffix starts at (documents created that day) + 1 and moves on
        until the name is free.
        """
        start, _ = day_bounds(today or local_now())
        first = len(await self.repository.fetch_by_date(start)) + 1
        for number in range(first, first + self.MAX_NAME_ATTEMPTS):
            file_name = f"{start:%Y-%m-%d}_{number:02d}"
            if await self.repository.is_file_name_unique(file_name):
                return file_name
        raise DocumentValidationError(
            f"Could not find a free file name for {start:%Y-%m-%d}"
        )

    @staticmethod
    def has_unsaved_changes(draft: DocumentDraft, document: Document | None = None) -> bool:
        """
        Whether discarding ``draft`` would lose work.

        Without a document (new document mode) any content counts. With one,
        file name, kind and the trimmed content are compared.
        """
        if document is None:
            return draft.has_valid_content()

        if draft.file_name != document.file_name or draft.kind is not document.kind:
            return True
        if document.kind is DocumentKind.ITEMS:
            saved = [
                s.text.strip()
                for s in sorted(document.sentences, key=lambda s: s.order)
                if s.text.strip()
            ]
            return draft.cleaned_sentences() != saved
        return draft.cleaned_free_text() != (document.free_text or "").strip()
