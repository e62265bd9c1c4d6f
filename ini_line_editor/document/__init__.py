"""Moteur d'édition ligne à ligne des documents INI.

Classes principales:
    - LineStore / CommentSyntax: lignes brutes et marqueurs de commentaire
    - SectionIndex / SectionRecord: index structurel des en-têtes
    - Locator / KeyRecord: recherche de sections, clés et points d'insertion
    - IniDocument: lignes + index d'un même instantané
    - Mutator: écriture de valeurs et mise en commentaire de clés

Example:
    >>> from ini_line_editor.document import IniDocument, Mutator
    >>> document = IniDocument(["[A]", "a=1", "", "[B]"])
    >>> Mutator(document).write_value("A", "b", "2")
    >>> document.lines.snapshot()
    ['[A]', 'a=1', 'b = 2', '', '[B]']
"""

from ini_line_editor.document.document import IniDocument
from ini_line_editor.document.index import (
    SECTION_PATTERN,
    SectionIndex,
    SectionRecord,
    build_section_index,
    match_section_name,
)
from ini_line_editor.document.lines import CommentSyntax, LineStore, is_blank
from ini_line_editor.document.locator import (
    KeyRecord,
    Locator,
    NameComparison,
    split_key_line,
)
from ini_line_editor.document.mutator import (
    Mutator,
    format_key_line,
    format_section_line,
    validate_entry,
)

__all__ = [
    # Lignes
    "CommentSyntax",
    "LineStore",
    "is_blank",
    # Index
    "SECTION_PATTERN",
    "SectionIndex",
    "SectionRecord",
    "build_section_index",
    "match_section_name",
    # Localisation
    "KeyRecord",
    "Locator",
    "NameComparison",
    "split_key_line",
    # Document
    "IniDocument",
    # Écriture
    "Mutator",
    "format_key_line",
    "format_section_line",
    "validate_entry",
]
