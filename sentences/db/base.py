from datetime import date, datetime, time, timedelta
from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, declared_attr, mapped_column


def local_now() -> datetime:
    """Naive local wall-clock time, microsecond precision."""
    return datetime.now()


def to_local(value: datetime) -> datetime:
    if value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


def day_bounds(value: date | datetime) -> tuple[datetime, datetime]:
    """Return ``[start_of_day, start_of_next_day)`` for the local calendar day."""
    if isinstance(value, datetime):
        value = to_local(value).date()
    start = datetime.combine(value, time.min)
    return start, start + timedelta(days=1)


class Base(DeclarativeBase):
    @declared_attr.directive
    def __tablename__(cls) -> str:
        name = cls.__name__
        return "".join(
            f"_{c.lower()}" if c.isupper() else c for c in name
        ).lstrip("_") + "s"

    def __repr__(self) -> str:
        pk = getattr(self, "id", None)
        return f"<{self.__class__.__name__}(id={pk})>"


class TimestampMixin:

    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=local_now,
        nullable=False,
        index=True,
    )
