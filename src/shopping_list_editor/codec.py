"""JSON round trip for shopping lists.

The persisted document is a single array of {"key": <name>, "value": <quantity>}
objects, e.g. [{"key":"Milk","value":2},{"key":"Bread","value":1}].
"""
from __future__ import annotations
import json
import logging
from typing import Iterable
from pydantic import BaseModel, ConfigDict, NonNegativeInt, TypeAdapter, ValidationError
from shopping_list_editor.models import Entry
from shopping_list_editor.shopping_list import ShoppingListError

logger = logging.getLogger(__name__)


class MalformedDocument(ShoppingListError, ValueError):
    pass


class _Record(BaseModel):
    model_config = ConfigDict(strict=True)

    key: str
    value: NonNegativeInt


_document = TypeAdapter(list[_Record])


def encode(entries: Iterable[Entry], indent: int | None = None) -> str:
    records = [{"key": e.name, "value": e.quantity} for e in entries]
    separators = (",", ":") if indent is None else (",", ": ")
    return json.dumps(records, ensure_ascii=False, indent=indent, separators=separators)


def _describe(error: ValidationError) -> str:
    first = error.errors()[0]
    loc = ".".join(str(part) for part in first["loc"])
    where = f" at {loc}" if loc else ""
    return f"{first['msg']}{where}"


def decode(text: str | bytes) -> list[Entry]:
    try:
        records = _document.validate_json(text)
    except ValidationError as e:
        logger.warning("Could not decode shopping list: %s", _describe(e))
        raise MalformedDocument(f"Not a valid shopping list document: {_describe(e)}") from e
    return [Entry(name=r.key, quantity=r.value) for r in records]
