from __future__ import annotations
import logging
from pathlib import Path
from shopping_list_editor.codec import MalformedDocument, decode, encode
from shopping_list_editor.config import Config
from shopping_list_editor.models import Entry
from shopping_list_editor.shopping_list import ShoppingList

logger = logging.getLogger(__name__)


class ListStore:
    """Keeps the working list between commands and handles save-as / open."""

    def __init__(self, base_dir: Path | None = None):
        self.base_dir = base_dir or Config().lists_dir
        self.base_dir.mkdir(parents=True, exist_ok=True)
        self._current_path = self.base_dir / "current.json"

    def load_current(self) -> ShoppingList:
        if not self._current_path.exists():
            return ShoppingList()
        return ShoppingList(decode(self._current_path.read_text(encoding="utf-8")))

    def save_current(self, shopping_list: ShoppingList) -> None:
        self._current_path.write_text(encode(shopping_list.snapshot()), encoding="utf-8")
        logger.debug("Saved %d entries to %s", len(shopping_list), self._current_path)

    def save_as(self, shopping_list: ShoppingList, path: Path) -> Path:
        if not path.suffix:
            path = path.with_suffix(".json")
        path.write_text(encode(shopping_list.snapshot()), encoding="utf-8")
        logger.debug("Wrote %d entries to %s", len(shopping_list), path)
        return path

    def open_file(self, path: Path) -> list[Entry]:
        if not path.exists():
            raise FileNotFoundError(f"File '{path}' not found.")
        # Lines are joined without separators; the decoder does not depend on line breaks.
        try:
            with path.open(encoding="utf-8") as f:
                text = "".join(line.rstrip("\r\n") for line in f)
        except UnicodeDecodeError as e:
            raise MalformedDocument(f"File '{path}' is not UTF-8 text.") from e
        return decode(text)
