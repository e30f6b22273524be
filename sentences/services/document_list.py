"""
Client-side document list kept in step with the repository.

The list is never patched in place: after any create/update/delete the
caller calls ``refresh()`` and the whole list is re-read and swapped in, so
a reader holding the old list never sees a half-applied change.
"""

import logging
from typing import Sequence
from uuid import UUID

from sentences.models import Document
from sentences.repositories.base import DocumentRepository

logger = logging.getLogger(__name__)


class DocumentListSync:

    def __init__(self, repository: DocumentRepository) -> None:
        self.repository = repository
        self.documents: list[Document] = []
        self.search_text = ""

    @staticmethod
    def sort_key(document: Document) -> tuple[float, str]:
        return (-document.last_updated_at.timestamp(), document.file_name)

    async def refresh(self) -> Sequence[Document]:
        documents = await self.repository.fetch_all()
        self.documents = sorted(documents, key=self.sort_key)
        logger.debug(f"Document list refreshed ({len(self.documents)} documents)")
        return self.documents

    # Every mutation ends with a full re-read.
    after_mutation = refresh

    @property
    def visible(self) -> list[Document]:
        """Documents matching ``search_text`` (case-insensitive), in list order."""
        needle = self.search_text.strip().casefold()
        if not needle:
            return list(self.documents)
        return [d for d in self.documents if self._matches(d, needle)]

    def find(self, document_id: UUID) -> Document | None:
        return next((d for d in self.documents if d.id == document_id), None)

    def __len__(self) -> int:
        return len(self.documents)

    @staticmethod
    def _matches(document: Document, needle: str) -> bool:
        haystacks = [document.file_name, document.free_text or ""]
        haystacks.extend(s.text for s in document.sentences)
        return any(needle in text.casefold() for text in haystacks)
