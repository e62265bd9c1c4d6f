"""
INI Line Editor - Édition en place de fichiers INI préservant le format.

Modules disponibles:
- document: Moteur ligne à ligne (LineStore, SectionIndex, Locator, Mutator)
- editor: Éditeur de fichier (IniEditor, IniFileEditor)
- config: Paramètres de l'éditeur (EditorSettings, FileConfigLoader)
- filesystem: Persistance ligne à ligne (LineFileStore, TextLineFileStore)
- logging: Gestion des logs (Logger, FileLogger, StdLogger)
- errors: Exceptions de l'éditeur
"""

__version__ = "1.0.0"

from ini_line_editor.logging import Logger, FileLogger, StdLogger
from ini_line_editor.errors import (
    IniEditorError,
    IniFileMissingError,
    EntryNotFoundError,
    SettingsError,
    PersistenceError,
)
from ini_line_editor.document import (
    CommentSyntax,
    LineStore,
    SectionRecord,
    SectionIndex,
    build_section_index,
    KeyRecord,
    Locator,
    NameComparison,
    IniDocument,
    Mutator,
)
from ini_line_editor.config import (
    ConfigLoader,
    FileConfigLoader,
    EditorSettings,
    load_settings,
)
from ini_line_editor.filesystem import LineFileStore, TextLineFileStore
from ini_line_editor.editor import IniEditor, IniFileEditor

__all__ = [
    # Logging
    "Logger",
    "FileLogger",
    "StdLogger",
    # Errors
    "IniEditorError",
    "IniFileMissingError",
    "EntryNotFoundError",
    "SettingsError",
    "PersistenceError",
    # Document
    "CommentSyntax",
    "LineStore",
    "SectionRecord",
    "SectionIndex",
    "build_section_index",
    "KeyRecord",
    "Locator",
    "NameComparison",
    "IniDocument",
    "Mutator",
    # Config
    "ConfigLoader",
    "FileConfigLoader",
    "EditorSettings",
    "load_settings",
    # Filesystem
    "LineFileStore",
    "TextLineFileStore",
    # Editor
    "IniEditor",
    "IniFileEditor",
]
