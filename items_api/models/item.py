"""Item ORM model."""

from __future__ import annotations

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from items_api.models.base import Base

# Bounds of the 32-bit INTEGER columns
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


class Item(Base):
    """A priced item. ``id`` is assigned by the database."""

    __tablename__ = "items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False)
