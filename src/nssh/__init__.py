"""nssh - ssh to named hosts and walk dsh machine lists."""

from .core import ClassifiedArgs, ListEntry, classify
from .lists import CursorStore, ListStore, ListWalker

__version__ = "0.1.0"

__all__ = ["ClassifiedArgs", "CursorStore", "ListEntry", "ListStore", "ListWalker", "classify"]
