"""
SQL Document Repository
=======================

SQLAlchemy-backed implementation of DocumentRepository over an AsyncSession.

Transactions:
-------------
Every write commits on its own, so create/update/delete are each atomic.
A revision record passed to a write goes into the same commit.
A failed write rolls the session back and raises StorageError; the caller
decides whether to retry or tell the user.

Reads never raise on storage errors. They log and return an empty result,
which the list view treats the same as "no documents yet". Documents
already in the session are refreshed from the database on fetch, unless
the session holds unsaved edits; those are never overwritten by a read.
"""

from __future__ import annotations
import logging
from datetime import date, datetime
from typing import Sequence
from uuid import UUID
from sqlalchemy import Select, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from sentences.db.base import day_bounds
from sentences.exceptions import StorageError
from sentences.models import Document, RevisionRecord, Sentence
from sentences.repositories.base import DocumentRepository

logger = logging.getLogger(__name__)


class SQLDocumentRepository(DocumentRepository):

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def fetch_all(self) -> Sequence[Document]:
        try:
            result = await self.session.execute(
                self._select_documents().order_by(
                    Document.last_updated_at.desc(), Document.file_name
                )
            )
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.warning(f"Failed to fetch documents: {e}")
            return []

    async def fetch_by_date(self, value: date | datetime) -> Sequence[Document]:
        start, end = day_bounds(value)
        try:
            result = await self.session.execute(
                select(Document)
                .where(Document.created_at >= start, Document.created_at < end)
                .order_by(Document.created_at)
            )
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.warning(f"Failed to fetch documents for {start:%Y-%m-%d}: {e}")
            return []

    async def fetch_by_id(self, document_id: UUID) -> Document | None:
        try:
            result = await self.session.execute(
                self._select_documents().where(Document.id == document_id)
            )
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.warning(f"Failed to fetch document {document_id}: {e}")
            return None

    async def fetch_sentence(self, sentence_id: UUID) -> Sentence | None:
        try:
            result = await self.session.execute(
                select(Sentence).where(Sentence.id == sentence_id)
            )
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.warning(f"Failed to fetch sentence {sentence_id}: {e}")
            return None

    async def create(
        self, document: Document, revision: RevisionRecord | None = None
    ) -> None:
        self.session.add(document)
        self._add_revision(revision)
        await self._commit(f"create document '{document.file_name}'")
        logger.info(
            f"Created document '{document.file_name}' ({document.id}) "
            f"with {len(document.sentences)} sentences"
        )

    async def update(
        self, document: Document, revision: RevisionRecord | None = None
    ) -> None:
        if document not in self.session:
            document = await self.session.merge(document)
        self._add_revision(revision)
        await self._commit(f"update document '{document.file_name}'")
        logger.info(f"Updated document '{document.file_name}' ({document.id})")

    async def delete(
        self, document: Document, revision: RevisionRecord | None = None
    ) -> None:
        target = document if document in self.session else await self.fetch_by_id(document.id)
        if target is None:
            logger.debug(f"Document {document.id} already gone, nothing to delete")
            return

        # Records appended since history was last loaded must cascade too.
        self.session.expire(target, ["history"])
        await self.session.delete(target)
        # Added after the cascade was collected, so the tombstone is kept.
        self._add_revision(revision)
        await self._commit(f"delete document '{target.file_name}'")
        logger.info(f"Deleted document '{target.file_name}' ({target.id})")

    async def is_file_name_unique(
        self, file_name: str, excluding: UUID | None = None
    ) -> bool:
        stmt = select(func.count(Document.id)).where(Document.file_name == file_name)
        if excluding is not None:
            stmt = stmt.where(Document.id != excluding)
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            # Unknown is treated as taken so a save can't break uniqueness.
            logger.warning(f"Failed to check file name '{file_name}': {e}")
            return False
        count = result.scalar() or 0
        logger.debug(f"File name '{file_name}' used by {count} other document(s)")
        return count == 0

    async def append_revision(self, record: RevisionRecord) -> None:
        self.session.add(record)
        await self._commit(f"append {record.action.value} revision")

    async def fetch_revisions(
        self, document_id: UUID, limit: int | None = None
    ) -> Sequence[RevisionRecord]:
        stmt = (
            select(RevisionRecord)
            .where(RevisionRecord.document_id == document_id)
            .order_by(RevisionRecord.changed_at.desc())
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        try:
            result = await self.session.execute(stmt)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.warning(f"Failed to fetch history for {document_id}: {e}")
            return []

    async def fetch_revision(self, record_id: UUID) -> RevisionRecord | None:
        try:
            result = await self.session.execute(
                select(RevisionRecord).where(RevisionRecord.id == record_id)
            )
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.warning(f"Failed to fetch revision {record_id}: {e}")
            return None

    def _select_documents(self) -> Select:
        stmt = select(Document)
        if not self._has_pending_changes():
            stmt = stmt.execution_options(populate_existing=True)
        return stmt

    def _has_pending_changes(self) -> bool:
        # autoflush is off, so unsaved edits live only on the instances.
        return bool(self.session.new or self.session.dirty or self.session.deleted)

    def _add_revision(self, revision: RevisionRecord | None) -> None:
        if revision is not None:
            self.session.add(revision)

    async def _commit(self, operation: str) -> None:
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.exception(f"Failed to {operation}")
            raise StorageError(
                f"Failed to {operation}", details={"cause": str(e)}
            ) from e
