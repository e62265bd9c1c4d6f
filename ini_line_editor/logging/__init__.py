"""Module de logging."""

from ini_line_editor.logging.base import Logger
from ini_line_editor.logging.file_logger import FileLogger
from ini_line_editor.logging.std_logger import StdLogger

__all__ = [
    "Logger",
    "FileLogger",
    "StdLogger",
]
