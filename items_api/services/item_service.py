"""Service layer for item use-cases."""

from __future__ import annotations

from sqlalchemy.orm import Session

from items_api.errors import NotFoundError
from items_api.repositories.item_repository import ItemRecord, ItemRepository


class ItemService:
    """Item use-cases."""

    def __init__(self, repository: ItemRepository | None = None) -> None:
        self._repo = repository or ItemRepository()

    def list_items(self, session: Session) -> list[ItemRecord]:
        return self._repo.list_items(session)

    def get_item(self, session: Session, item_id: int) -> ItemRecord:
        item = self._repo.get_by_id(session, item_id)
        if item is None:
            raise NotFoundError()
        return item

    def create_item(self, session: Session, name: str, price: int) -> ItemRecord:
        return self._repo.create(session, name=name, price=price)

    def update_item(self, session: Session, item_id: int, name: str, price: int) -> ItemRecord:
        item = self._repo.update(session, item_id, name=name, price=price)
        if item is None:
            raise NotFoundError()
        return item

    def delete_item(self, session: Session, item_id: int) -> None:
        if not self._repo.delete(session, item_id):
            raise NotFoundError()
