"""Construction de l'index structurel des sections.

L'index est une projection : il est reconstruit entièrement après chaque
mutation du document et n'est jamais mis à jour de façon incrémentale.
"""

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from ini_line_editor.document.lines import CommentSyntax, LineStore

# Un nom entre crochets en tête de ligne ; le reste de la ligne est ignoré.
SECTION_PATTERN = re.compile(r"^\[([^\]]+?)\]")


def match_section_name(content: str) -> str | None:
    """Extrait le nom de section d'un contenu logique.

    Args:
        content: Ligne déjà débarrassée de ses marqueurs de commentaire.

    Returns:
        Nom de la section (sans espaces autour) ou None.
    """
    match = SECTION_PATTERN.match(content)
    if match is None:
        return None
    return match.group(1).strip()


@dataclass(frozen=True)
class SectionRecord:
    """En-tête de section repéré dans le document.

    Attributes:
        name: Nom de la section.
        line_index: Index de la ligne d'en-tête.
        is_commented: True si l'en-tête est désactivé par un commentaire.
    """

    name: str
    line_index: int
    is_commented: bool


class SectionIndex:
    """Liste ordonnée des en-têtes de section d'un instantané du document."""

    def __init__(self, records: list[SectionRecord], line_count: int) -> None:
        self._records = records
        self._line_count = line_count

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[SectionRecord]:
        return iter(self._records)

    def __getitem__(self, position: int) -> SectionRecord:
        return self._records[position]

    @property
    def line_count(self) -> int:
        """Nombre de lignes du document au moment de la construction."""
        return self._line_count

    def first(self, matches: Callable[[str], bool]) -> SectionRecord | None:
        """Retourne le premier en-tête dont le nom satisfait le prédicat."""
        for record in self._records:
            if matches(record.name):
                return record
        return None

    def following(self, record: SectionRecord) -> SectionRecord | None:
        """Retourne l'en-tête qui suit ``record`` dans le document."""
        for candidate in self._records:
            if candidate.line_index > record.line_index:
                return candidate
        return None


def build_section_index(
    lines: LineStore, syntax: CommentSyntax
) -> SectionIndex:
    """Parcourt le document une fois et relève chaque en-tête de section.

    Les lignes mal formées (crochets non fermés, etc.) ne sont simplement
    pas reconnues comme sections.

    Args:
        lines: Lignes du document.
        syntax: Marqueurs de commentaire en vigueur.

    Returns:
        Index des sections, trié par numéro de ligne croissant.
    """
    records: list[SectionRecord] = []
    for index, line in enumerate(lines):
        name = match_section_name(syntax.strip_comment_prefix(line))
        if name is None:
            continue
        records.append(
            SectionRecord(
                name=name,
                line_index=index,
                is_commented=syntax.is_commented(line),
            )
        )
    return SectionIndex(records, len(lines))
