"""Named host lists and the cursor walking them."""

from .cursor import CursorStore
from .entries import DISABLED_TAG, ListStore, parse_entries, parse_entry
from .walker import ListWalker

__all__ = ["DISABLED_TAG", "CursorStore", "ListStore", "ListWalker", "parse_entries", "parse_entry"]
