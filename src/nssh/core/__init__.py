"""Core argument classification and shared types."""

from .classifier import build_classified, classify, tokenize
from .types import NEXT, RESET, ClassifiedArgs, ListEntry, Token

__all__ = [
    "NEXT",
    "RESET",
    "ClassifiedArgs",
    "ListEntry",
    "Token",
    "build_classified",
    "classify",
    "tokenize",
]
