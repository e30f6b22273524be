"""Tests for the client-side document list."""

import pytest

from sentences.models import DocumentKind
from sentences.schemas import DocumentDraft
from sentences.services import DocumentListSync


@pytest.fixture
def document_list(repository):
    return DocumentListSync(repository)


def draft(file_name, *texts):
    return DocumentDraft(file_name=file_name, sentences=list(texts))


class TestRefresh:

    @pytest.mark.asyncio
    async def test_empty_store(self, document_list):
        assert await document_list.refresh() == []
        assert len(document_list) == 0

    @pytest.mark.asyncio
    async def test_follows_create_update_delete(self, document_list, document_service):
        first = await document_service.create_document(draft("first", "x"))
        second = await document_service.create_document(draft("second", "y"))
        await document_list.after_mutation()
        assert [d.file_name for d in document_list.documents] == ["second", "first"]

        await document_service.update_document(first.id, draft("first", "x", "more"))
        await document_list.after_mutation()
        assert [d.file_name for d in document_list.documents] == ["first", "second"]

        await document_service.delete_document(second.id)
        await document_list.after_mutation()
        assert [d.file_name for d in document_list.documents] == ["first"]
        assert document_list.find(second.id) is None
        assert document_list.find(first.id).id == first.id

    @pytest.mark.asyncio
    async def test_refresh_swaps_the_list(self, document_list, document_service):
        await document_service.create_document(draft("one", "x"))
        old = await document_list.refresh()

        await document_service.create_document(draft("two", "y"))
        await document_list.refresh()

        assert [d.file_name for d in old] == ["one"]
        assert len(document_list) == 2


class TestSearch:

    @pytest.mark.asyncio
    async def test_matches_name_and_content(self, document_list, document_service):
        await document_service.create_document(draft("Groceries", "milk", "Bread"))
        await document_service.create_document(
            DocumentDraft(file_name="Diary", kind=DocumentKind.FREE_TEXT, free_text="Ate bread today")
        )
        await document_service.create_document(draft("Work", "email boss"))
        await document_list.refresh()

        document_list.search_text = "BREAD"
        assert sorted(d.file_name for d in document_list.visible) == ["Diary", "Groceries"]

        document_list.search_text = "work"
        assert [d.file_name for d in document_list.visible] == ["Work"]

        document_list.search_text = "  "
        assert len(document_list.visible) == 3
