from sentences.db.base import Base, TimestampMixin, day_bounds, local_now
from sentences.db.session import (
    async_session_maker,
    close_db,
    create_engine,
    create_session_maker,
    engine,
    get_db,
    init_db,
)

__all__ = [
    "Base",
    "TimestampMixin",
    "local_now",
    "day_bounds",
    "engine",
    "async_session_maker",
    "create_engine",
    "create_session_maker",
    "get_db",
    "init_db",
    "close_db",
]
