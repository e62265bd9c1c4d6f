"""Module de gestion des erreurs."""

from ini_line_editor.errors.exceptions import (EntryNotFoundError,
                                               IniEditorError,
                                               IniFileMissingError,
                                               PersistenceError,
                                               SettingsError)


__all__ = [
    "IniEditorError",
    "IniFileMissingError",
    "EntryNotFoundError",
    "SettingsError",
    "PersistenceError",
]
