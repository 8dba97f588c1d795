"""SQLAlchemy models."""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class ShoppingListItem(Base):
    """One entry on the shopping list.

    Timestamps are epoch milliseconds. Columns stay nullable at the SQL level;
    the content provider fills every column on insert.
    """

    __tablename__ = "shopping_list"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    item: Mapped[str | None] = mapped_column(Text)
    status: Mapped[int | None] = mapped_column(Integer)
    created_at: Mapped[int | None] = mapped_column(Integer)
    modified_at: Mapped[int | None] = mapped_column(Integer)
