"""Document INI en mémoire : lignes, syntaxe et index des sections."""

from collections.abc import Iterable

from ini_line_editor.document.index import (
    SectionIndex,
    SectionRecord,
    build_section_index,
)
from ini_line_editor.document.lines import CommentSyntax, LineStore
from ini_line_editor.document.locator import Locator, NameComparison


class IniDocument:
    """Possède les lignes d'un document et son index structurel.

    L'index est reconstruit en entier par ``rebuild_index()`` ; il n'est
    jamais corrigé ligne par ligne.

    Attributes:
        lines: Lignes brutes du document.
        syntax: Marqueurs de commentaire.
        comparison: Politique de comparaison des noms.
    """

    def __init__(
        self,
        lines: Iterable[str] = (),
        syntax: CommentSyntax | None = None,
        comparison: NameComparison = NameComparison.ORDINAL,
    ) -> None:
        self.lines = LineStore(lines)
        self.syntax = syntax or CommentSyntax()
        self.comparison = comparison
        self._index = build_section_index(self.lines, self.syntax)

    @property
    def index(self) -> SectionIndex:
        """Index des sections du dernier instantané."""
        return self._index

    def rebuild_index(self) -> SectionIndex:
        """Recalcule l'index des sections depuis les lignes courantes."""
        self._index = build_section_index(self.lines, self.syntax)
        return self._index

    def restore(self, lines: Iterable[str]) -> None:
        """Remplace toutes les lignes par un instantané antérieur."""
        self.lines = LineStore(lines)
        self.rebuild_index()

    def locator(self) -> Locator:
        """Retourne un Locator lié à l'instantané courant."""
        return Locator(self.lines, self._index, self.syntax, self.comparison)

    def section_names(self, include_commented: bool = False) -> list[str]:
        """Liste les noms de sections distincts, dans l'ordre du document.

        Seule la première occurrence d'un nom compte : si elle est
        commentée, la section est considérée comme inactive.
        """
        names: list[str] = []
        seen: set[str] = set()
        for record in self._index:
            normalized = self.comparison.normalize(record.name)
            if normalized in seen:
                continue
            seen.add(normalized)
            if record.is_commented and not include_commented:
                continue
            names.append(record.name)
        return names

    def active_section(self, name: str) -> SectionRecord | None:
        """Retourne la section si elle existe et n'est pas commentée."""
        record = self.locator().find_section(name)
        if record is None or record.is_commented:
            return None
        return record

    def lookup(self, section: str, key: str) -> str | None:
        """Lit une valeur active ; None si absente ou désactivée."""
        record = self.active_section(section)
        if record is None:
            return None
        key_record = self.locator().find_key(record, key)
        if key_record is None or key_record.is_commented:
            return None
        return key_record.value

    def to_dict(self) -> dict[str, dict[str, str]]:
        """Projette les sections et clés actives en dictionnaire imbriqué.

        La première occurrence d'une section ou d'une clé l'emporte,
        comme pour ``lookup()`` ; une première occurrence commentée
        masque les suivantes.
        """
        locator = self.locator()
        result: dict[str, dict[str, str]] = {}
        for name in self.section_names():
            record = locator.find_section(name)
            values: dict[str, str] = {}
            seen: set[str] = set()
            for key_record in locator.keys(record):
                normalized = self.comparison.normalize(key_record.name)
                if normalized in seen:
                    continue
                seen.add(normalized)
                if not key_record.is_commented:
                    values[key_record.name] = key_record.value
            result[name] = values
        return result
