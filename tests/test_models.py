"""Tests for the ORM entities and time helpers."""

from datetime import date, datetime, timedelta, timezone

from sentences.db.base import day_bounds, local_now, to_local
from sentences.models import Document, DocumentKind, RevisionAction, RevisionRecord, Sentence


class TestDocument:

    def test_new_items_document(self):
        document = Document.new("2025-01-01_01", DocumentKind.ITEMS, "jane.doe")

        assert document.id is not None
        assert document.free_text is None
        assert document.sentences == []
        assert document.created_by == document.updated_by == "jane.doe"
        assert document.created_at == document.last_updated_at

    def test_new_free_text_document(self):
        document = Document.new("notes", DocumentKind.FREE_TEXT, "jane.doe")

        assert document.free_text == ""

    def test_ids_are_unique(self):
        first = Document.new("a", DocumentKind.ITEMS, "x")
        second = Document.new("b", DocumentKind.ITEMS, "x")

        assert first.id != second.id

    def test_table_names(self):
        assert Document.__tablename__ == "documents"
        assert Sentence.__tablename__ == "sentences"
        assert RevisionRecord.__tablename__ == "revision_records"

    def test_enum_values(self):
        assert DocumentKind.ITEMS.value == "items"
        assert DocumentKind.FREE_TEXT.value == "freeText"
        assert DocumentKind.FREE_TEXT.display_name == "Free Text"
        assert RevisionAction.DELETED.value == "deleted"
        assert RevisionAction.UPDATED.display_name == "Updated"

    def test_sentence_back_reference(self):
        document = Document.new("a", DocumentKind.ITEMS, "x")
        sentence = Sentence.new("hello", 0)

        document.sentences.append(sentence)

        assert sentence.document is document


class TestTimeHelpers:

    def test_local_now_is_naive(self):
        assert local_now().tzinfo is None

    def test_day_bounds_for_date(self):
        start, end = day_bounds(date(2025, 1, 1))

        assert start == datetime(2025, 1, 1)
        assert end == datetime(2025, 1, 2)

    def test_day_bounds_for_datetime(self):
        start, end = day_bounds(datetime(2025, 1, 1, 23, 59, 59))

        assert start == datetime(2025, 1, 1)
        assert end - start == timedelta(days=1)

    def test_aware_values_become_local(self):
        aware = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)

        local = to_local(aware)

        assert local.tzinfo is None
        assert local == aware.astimezone().replace(tzinfo=None)
