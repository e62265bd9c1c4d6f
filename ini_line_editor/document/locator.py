"""Localisation des sections et des clés dans un document INI.

Le Locator répond à trois questions sur un instantané du document :
où se trouve une section, où se trouve une clé dans cette section,
et où insérer une nouvelle clé lorsqu'elle est absente.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum

from ini_line_editor.document.index import (
    SectionIndex,
    SectionRecord,
    match_section_name,
)
from ini_line_editor.document.lines import CommentSyntax, LineStore, is_blank


class NameComparison(StrEnum):
    """Politique de comparaison des noms de sections et de clés."""

    ORDINAL = "ordinal"
    IGNORE_CASE = "ignore_case"

    def normalize(self, name: str) -> str:
        """Retourne la forme du nom utilisée pour les comparaisons."""
        if self is NameComparison.IGNORE_CASE:
            return name.casefold()
        return name

    def equals(self, left: str, right: str) -> bool:
        """Compare deux noms selon la politique."""
        return self.normalize(left) == self.normalize(right)


@dataclass(frozen=True)
class KeyRecord:
    """Ligne clé=valeur repérée dans l'étendue d'une section.

    Attributes:
        name: Nom de la clé (sans espaces autour).
        raw_value: Tout ce qui suit le premier '=' de la ligne.
        line_index: Index de la ligne dans le document.
        is_commented: True si la ligne est désactivée.
    """

    name: str
    raw_value: str
    line_index: int
    is_commented: bool

    @property
    def value(self) -> str:
        """Valeur sans espaces autour, telle que retournée en lecture."""
        return self.raw_value.strip()


def split_key_line(content: str) -> tuple[str, str] | None:
    """Découpe un contenu logique sur le premier '='.

    Returns:
        (nom, reste brut) ou None si la ligne n'a pas la forme d'une clé.
    """
    if "=" not in content:
        return None
    name, raw_value = content.split("=", 1)
    name = name.strip()
    if not name:
        return None
    return name, raw_value


class Locator:
    """Recherche de positions dans un instantané du document.

    Attributes:
        lines: Lignes du document.
        index: Index des sections construit sur ces mêmes lignes.
        syntax: Marqueurs de commentaire.
        comparison: Politique de comparaison des noms.
    """

    def __init__(
        self,
        lines: LineStore,
        index: SectionIndex,
        syntax: CommentSyntax,
        comparison: NameComparison = NameComparison.ORDINAL,
    ) -> None:
        if index.line_count != len(lines):
            raise ValueError(
                "Index des sections périmé : "
                f"{index.line_count} lignes indexées, {len(lines)} présentes"
            )
        self.lines = lines
        self.index = index
        self.syntax = syntax
        self.comparison = comparison

    def find_section(self, name: str) -> SectionRecord | None:
        """Retourne le premier en-tête portant ce nom, ou None.

        Le nom demandé est comparé sans ses espaces autour, comme les
        noms relevés dans le document.
        """
        name = name.strip()
        return self.index.first(
            lambda candidate: self.comparison.equals(candidate, name)
        )

    def section_extent(self, section: SectionRecord) -> tuple[int, int]:
        """Retourne l'étendue [début, fin) du contenu d'une section.

        Le début suit immédiatement l'en-tête ; la fin est l'en-tête
        suivant ou la fin du document.
        """
        following = self.index.following(section)
        end = following.line_index if following else len(self.lines)
        return section.line_index + 1, end

    def keys(self, section: SectionRecord) -> Iterator[KeyRecord]:
        """Parcourt, dans l'ordre, toutes les lignes clé=valeur de la section.

        Les lignes commentées sont incluses et marquées comme telles.
        """
        start, end = self.section_extent(section)
        for line_index in range(start, end):
            line = self.lines[line_index]
            if is_blank(line):
                continue
            parsed = split_key_line(self.syntax.strip_comment_prefix(line))
            if parsed is None:
                continue
            name, raw_value = parsed
            yield KeyRecord(
                name=name,
                raw_value=raw_value,
                line_index=line_index,
                is_commented=self.syntax.is_commented(line),
            )

    def find_key(self, section: SectionRecord, key: str) -> KeyRecord | None:
        """Retourne la première occurrence de la clé dans la section.

        Les occurrences suivantes d'une clé dupliquée sont masquées.
        """
        key = key.strip()
        for record in self.keys(section):
            if self.comparison.equals(record.name, key):
                return record
        return None

    def has_active_content(self, section: SectionRecord) -> bool:
        """Indique s'il reste une ligne active (ni vide, ni commentée) dans
        l'étendue de la section. Une ligne d'en-tête n'est pas du contenu.
        """
        start, end = self.section_extent(section)
        for line_index in range(start, end):
            line = self.lines[line_index]
            if self.syntax.is_blank_or_fully_commented(line):
                continue
            if match_section_name(line.strip()) is not None:
                continue
            return True
        return False

    def next_insertion_point(self, section: SectionRecord) -> int:
        """Calcule où insérer une nouvelle clé dans une section existante.

        On remonte depuis la fin de l'étendue jusqu'à la dernière ligne
        non vide, de sorte que les lignes vides de séparation restent
        avant la section suivante. Une section sans contenu reçoit la clé
        juste après son en-tête. Un index égal à la taille du document
        signifie un ajout en fin.
        """
        start, end = self.section_extent(section)
        for line_index in range(end - 1, start - 1, -1):
            if not is_blank(self.lines[line_index]):
                return line_index + 1
        return start
