"""Marshmallow schemas for Item."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields, validate

from items_api.models.item import INT_MAX, INT_MIN


class ItemSchema(Schema):
    """Serialize Item."""

    id = fields.Int(required=True)
    name = fields.Str(required=True)
    price = fields.Int(required=True)


class ItemWriteSchema(Schema):
    """Validate create/replace Item payload."""

    class Meta:
        # Clients may echo back "id"; it is never taken from the body.
        unknown = EXCLUDE

    name = fields.Str(required=True)
    price = fields.Int(required=True, strict=True, validate=validate.Range(min=INT_MIN, max=INT_MAX))
