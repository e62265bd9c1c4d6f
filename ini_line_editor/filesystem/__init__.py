"""Module de persistance des fichiers."""

from ini_line_editor.filesystem.base import LineFileStore
from ini_line_editor.filesystem.text_store import TextLineFileStore

__all__ = [
    "LineFileStore",
    "TextLineFileStore",
]
