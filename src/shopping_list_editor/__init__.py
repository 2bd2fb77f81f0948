from shopping_list_editor.codec import MalformedDocument, decode, encode
from shopping_list_editor.models import Entry
from shopping_list_editor.shopping_list import (
    IndexOutOfRange,
    InvalidEntry,
    ShoppingList,
    ShoppingListError,
)

__all__ = [
    "Entry",
    "IndexOutOfRange",
    "InvalidEntry",
    "MalformedDocument",
    "ShoppingList",
    "ShoppingListError",
    "decode",
    "encode",
]
