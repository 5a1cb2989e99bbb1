"""ORM models."""

from items_api.models.base import Base
from items_api.models.item import Item

__all__ = ["Base", "Item"]
