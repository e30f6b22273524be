"""In-memory DocumentRepository for tests and previews."""

from __future__ import annotations
import logging
import uuid
from datetime import date, datetime
from typing import Sequence
from uuid import UUID

from sentences.db.base import day_bounds, local_now
from sentences.models import Document, RevisionRecord, Sentence
from sentences.repositories.base import DocumentRepository

logger = logging.getLogger(__name__)


class InMemoryDocumentRepository(DocumentRepository):
    """
    Dict-backed repository with the same observable behaviour as the SQL one:
    exact-string name uniqueness, local-day date filter, cascade delete of
    sentences and owned revision records.
    """

    def __init__(self) -> None:
        self._documents: dict[UUID, Document] = {}
        self._revisions: list[RevisionRecord] = []

    async def fetch_all(self) -> Sequence[Document]:
        return sorted(
            self._documents.values(),
            key=lambda d: (-d.last_updated_at.timestamp(), d.file_name),
        )

    async def fetch_by_date(self, value: date | datetime) -> Sequence[Document]:
        start, end = day_bounds(value)
        return sorted(
            (d for d in self._documents.values() if start <= d.created_at < end),
            key=lambda d: d.created_at,
        )

    async def fetch_by_id(self, document_id: UUID) -> Document | None:
        return self._documents.get(document_id)

    async def fetch_sentence(self, sentence_id: UUID) -> Sentence | None:
        for document in self._documents.values():
            for sentence in document.sentences:
                if sentence.id == sentence_id:
                    return sentence
        return None

    async def create(
        self, document: Document, revision: RevisionRecord | None = None
    ) -> None:
        if document.id is None:
            document.id = uuid.uuid4()
        self._link_sentences(document)
        self._documents[document.id] = document
        self._add_revision(revision)
        logger.info(f"Created document '{document.file_name}' ({document.id})")

    async def update(
        self, document: Document, revision: RevisionRecord | None = None
    ) -> None:
        if document.id not in self._documents:
            logger.debug(f"Document {document.id} not stored, nothing to update")
            return
        self._link_sentences(document)
        self._documents[document.id] = document
        self._add_revision(revision)
        logger.info(f"Updated document '{document.file_name}' ({document.id})")

    async def delete(
        self, document: Document, revision: RevisionRecord | None = None
    ) -> None:
        if self._documents.pop(document.id, None) is None:
            logger.debug(f"Document {document.id} already gone, nothing to delete")
            return
        self._revisions = [r for r in self._revisions if r.document_id != document.id]
        self._add_revision(revision)
        logger.info(f"Deleted document '{document.file_name}' ({document.id})")

    async def is_file_name_unique(
        self, file_name: str, excluding: UUID | None = None
    ) -> bool:
        return not any(
            d.file_name == file_name and d.id != excluding
            for d in self._documents.values()
        )

    async def append_revision(self, record: RevisionRecord) -> None:
        self._add_revision(record)

    async def fetch_revisions(
        self, document_id: UUID, limit: int | None = None
    ) -> Sequence[RevisionRecord]:
        # Later appends win timestamp ties.
        records = sorted(
            (r for r in reversed(self._revisions) if r.document_id == document_id),
            key=lambda r: r.changed_at,
            reverse=True,
        )
        return records if limit is None else records[:limit]

    async def fetch_revision(self, record_id: UUID) -> RevisionRecord | None:
        return next((r for r in self._revisions if r.id == record_id), None)

    def _add_revision(self, record: RevisionRecord | None) -> None:
        if record is None:
            return
        if record.id is None:
            record.id = uuid.uuid4()
        if record.changed_at is None:
            record.changed_at = local_now()
        self._revisions.append(record)

    @staticmethod
    def _link_sentences(document: Document) -> None:
        for sentence in document.sentences:
            sentence.document_id = document.id
