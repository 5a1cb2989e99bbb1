"""Item routes (controllers). No business logic here."""

from __future__ import annotations

from typing import Any

from flask import Blueprint, request

from items_api.db import get_session
from items_api.errors import NotFoundError, ValidationError
from items_api.models.item import INT_MAX, INT_MIN
from items_api.schemas.item import ItemSchema, ItemWriteSchema
from items_api.services.item_service import ItemService
from items_api.utils.responses import no_content, ok

items_bp = Blueprint("items", __name__)

_item_schema = ItemSchema()
_items_schema = ItemSchema(many=True)
_write_schema = ItemWriteSchema()
_service = ItemService()


def _parse_item_id(raw: str) -> int:
    try:
        item_id = int(raw)
    except ValueError:
        raise ValidationError(f"Invalid item id: {raw!r}") from None
    # No row can carry an id the column cannot hold
    if not INT_MIN <= item_id <= INT_MAX:
        raise NotFoundError()
    return item_id


def _load_body() -> dict[str, Any]:
    payload = request.get_json(force=True, silent=True)
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return _write_schema.load(payload)


@items_bp.get("/items")
def list_items():
    """List all items."""

    items = _service.list_items(get_session())
    return ok(_items_schema.dump(items))


@items_bp.get("/items/<item_id>")
def get_item(item_id: str):
    """Get a single item by id."""

    item = _service.get_item(get_session(), _parse_item_id(item_id))
    return ok(_item_schema.dump(item))


@items_bp.post("/items")
def create_item():
    """Create a new item."""

    data = _load_body()
    item = _service.create_item(get_session(), name=data["name"], price=data["price"])
    return ok(_item_schema.dump(item), status_code=201)


@items_bp.put("/items/<item_id>")
def update_item(item_id: str):
    """Replace name and price of an existing item."""

    parsed_id = _parse_item_id(item_id)
    data = _load_body()
    item = _service.update_item(get_session(), parsed_id, name=data["name"], price=data["price"])
    return ok(_item_schema.dump(item))


@items_bp.delete("/items/<item_id>")
def delete_item(item_id: str):
    _service.delete_item(get_session(), _parse_item_id(item_id))
    return no_content()
