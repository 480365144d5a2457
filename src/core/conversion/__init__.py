"""Per-user conversion state and its in-memory store."""

from src.core.conversion.session import ConversionSession, TextGenerator
from src.core.conversion.store import SessionStore

__all__ = [
    "ConversionSession",
    "SessionStore",
    "TextGenerator",
]
