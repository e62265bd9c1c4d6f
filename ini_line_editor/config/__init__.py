"""Module de configuration."""

from ini_line_editor.config.loader import ConfigLoader, FileConfigLoader
from ini_line_editor.config.settings import EditorSettings, load_settings

__all__ = [
    "ConfigLoader",
    "FileConfigLoader",
    "EditorSettings",
    "load_settings",
]
