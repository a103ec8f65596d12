from sqlalchemy import Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from items_svc.db.base import Base


class Item(Base):
    """SQLAlchemy model for a catalog item."""

    __tablename__ = "items"
    # ids are never handed out twice, also on SQLite
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text())
    category: Mapped[str | None] = mapped_column(String(100))
    price: Mapped[float | None] = mapped_column(Numeric(10, 2, asdecimal=False))

    def __repr__(self) -> str:
        return f"<Item(id={self.id}, name={self.name})>"
