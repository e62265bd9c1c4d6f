"""Éditeurs de fichiers INI préservant le format."""

from ini_line_editor.editor.base import IniEditor
from ini_line_editor.editor.file_editor import IniFileEditor

__all__ = [
    "IniEditor",
    "IniFileEditor",
]
