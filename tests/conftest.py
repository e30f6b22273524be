"""Shared fixtures: a throwaway SQLite file per test and both repositories."""

import pytest

from sentences.db import close_db, create_engine, create_session_maker, init_db
from sentences.models import Document, DocumentKind, Sentence
from sentences.repositories import InMemoryDocumentRepository, SQLDocumentRepository
from sentences.services import DocumentService, HistoryService


@pytest.fixture
async def engine(tmp_path):
    """Create a fresh database file with all tables."""
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'sentences.db'}")
    await init_db(engine)
    yield engine
    await close_db(engine)


@pytest.fixture
def session_maker(engine):
    return create_session_maker(engine)


@pytest.fixture
async def db_session(session_maker):
    async with session_maker() as session:
        yield session


@pytest.fixture
def sql_repository(db_session):
    return SQLDocumentRepository(db_session)


@pytest.fixture
def memory_repository():
    return InMemoryDocumentRepository()


@pytest.fixture(params=["sql", "memory"])
async def repository(request, session_maker):
    """Run the test once against each repository implementation."""
    if request.param == "memory":
        yield InMemoryDocumentRepository()
        return
    async with session_maker() as session:
        yield SQLDocumentRepository(session)


@pytest.fixture
async def fresh_repository(repository, session_maker):
    """A repository that only sees committed state (a new session for SQL)."""
    if isinstance(repository, InMemoryDocumentRepository):
        yield repository
        return
    async with session_maker() as session:
        yield SQLDocumentRepository(session)


@pytest.fixture
def history_service(repository):
    return HistoryService(repository, retain_deletion_records=True, history_limit=50)


@pytest.fixture
def document_service(repository, history_service):
    return DocumentService(repository, history_service)


def make_document(
    file_name: str,
    kind: DocumentKind = DocumentKind.ITEMS,
    texts: list[str] | None = None,
    actor: str = "test.user",
) -> Document:
    """Build a transient document without going through the service."""
    document = Document.new(file_name, kind, actor)
    if kind is DocumentKind.ITEMS:
        document.sentences = [Sentence.new(t, i) for i, t in enumerate(texts or [])]
    else:
        document.free_text = " ".join(texts or [])
    return document


@pytest.fixture
def document_factory():
    return make_document
