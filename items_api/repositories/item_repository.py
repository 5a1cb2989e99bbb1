"""Repository layer for Item persistence.

Every method issues exactly one parameterized statement on the caller's
session. Database errors are not caught here.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy import delete, insert, select, update
from sqlalchemy.orm import Session

from items_api.models.item import Item

_items = Item.__table__


@dataclass(frozen=True)
class ItemRecord:
    id: int
    name: str
    price: int


class ItemRepository:
    """CRUD operations for Item."""

    def list_items(self, session: Session) -> list[ItemRecord]:
        stmt = select(_items.c.id, _items.c.name, _items.c.price).order_by(_items.c.id.asc())
        return [ItemRecord(id=row.id, name=row.name, price=row.price) for row in session.execute(stmt)]

    def get_by_id(self, session: Session, item_id: int) -> ItemRecord | None:
        stmt = select(_items.c.id, _items.c.name, _items.c.price).where(_items.c.id == item_id)
        row = session.execute(stmt).first()
        if row is None:
            return None
        return ItemRecord(id=row.id, name=row.name, price=row.price)

    def create(self, session: Session, name: str, price: int) -> ItemRecord:
        stmt = insert(_items).values(name=name, price=price).returning(_items.c.id)
        new_id = session.execute(stmt).scalar_one()
        return ItemRecord(id=int(new_id), name=name, price=price)

    def update(self, session: Session, item_id: int, name: str, price: int) -> ItemRecord | None:
        """Overwrite name/price. Returns the input echoed back, or None if no row matched."""

        stmt = update(_items).where(_items.c.id == item_id).values(name=name, price=price)
        result = session.execute(stmt)
        if result.rowcount == 0:
            return None
        return ItemRecord(id=item_id, name=name, price=price)

    def delete(self, session: Session, item_id: int) -> bool:
        stmt = delete(_items).where(_items.c.id == item_id)
        result = session.execute(stmt)
        return result.rowcount > 0
