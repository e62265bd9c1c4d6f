"""Primitives d'écriture sur un document INI.

Chaque primitive modifie les lignes en mémoire puis reconstruit l'index
des sections. La persistance reste à la charge de l'appelant.
"""

from ini_line_editor.document.document import IniDocument
from ini_line_editor.document.lines import CommentSyntax

_LINE_BREAKS = ("\n", "\r")


def format_section_line(name: str) -> str:
    """Forme canonique d'un en-tête de section."""
    return f"[{name}]"


def format_key_line(name: str, value: str) -> str:
    """Forme canonique d'une ligne clé = valeur."""
    return f"{name} = {value}"


def validate_entry(
    section: str, key: str, syntax: CommentSyntax, value: str = ""
) -> None:
    """Vérifie qu'une section, une clé et une valeur tiennent sur une ligne.

    Raises:
        ValueError: Si un nom est vide ou ne peut pas être relu tel quel.
    """
    for label, text in (("section", section), ("clé", key), ("valeur", value)):
        if any(brk in text for brk in _LINE_BREAKS):
            raise ValueError(f"La {label} {text!r} contient un saut de ligne")
    if not section.strip() or "]" in section:
        raise ValueError(f"Nom de section invalide : {section!r}")
    stripped_key = key.strip()
    if (
        not stripped_key
        or "=" in key
        or stripped_key.startswith("[")
        or syntax.is_commented(stripped_key)
    ):
        raise ValueError(f"Nom de clé invalide : {key!r}")


class Mutator:
    """Applique les écritures sur un IniDocument.

    Attributes:
        document: Document modifié en place.
    """

    def __init__(self, document: IniDocument) -> None:
        self.document = document

    def write_value(self, section: str, key: str, value: str) -> None:
        """Écrit ``key = value`` dans la section, en créant ce qui manque.

        Les noms et la valeur sont écrits sans espaces autour, tels
        qu'ils seront relus.

        - section absente : en-tête et clé ajoutés en fin de document ;
        - section commentée : l'en-tête est réactivé ;
        - clé présente (active ou commentée) : sa ligne est remplacée ;
        - clé absente : insérée après la dernière ligne non vide
          de la section.

        Raises:
            ValueError: Si la section, la clé ou la valeur est invalide.
        """
        document = self.document
        validate_entry(section, key, document.syntax, value)
        section, key, value = section.strip(), key.strip(), value.strip()
        locator = document.locator()

        record = locator.find_section(section)
        if record is None:
            document.lines.append(
                format_section_line(section), format_key_line(key, value)
            )
            document.rebuild_index()
            return

        if record.is_commented:
            document.lines.replace(
                record.line_index, format_section_line(record.name)
            )

        key_record = locator.find_key(record, key)
        if key_record is not None:
            document.lines.replace(
                key_record.line_index, format_key_line(key_record.name, value)
            )
        else:
            document.lines.insert(
                locator.next_insertion_point(record),
                format_key_line(key, value),
            )
        document.rebuild_index()

    def comment_key(self, section: str, key: str) -> bool:
        """Commente une clé active, puis sa section si plus rien n'y est actif.

        Returns:
            True si le document a été modifié, False si rien n'était
            à commenter (section ou clé absente ou déjà commentée).
        """
        document = self.document
        syntax = document.syntax
        locator = document.locator()

        record = locator.find_section(section)
        if record is None or record.is_commented:
            return False
        key_record = locator.find_key(record, key)
        if key_record is None or key_record.is_commented:
            return False

        document.lines.replace(
            key_record.line_index,
            syntax.comment(format_key_line(key_record.name, key_record.value)),
        )
        if not locator.has_active_content(record):
            document.lines.replace(
                record.line_index,
                syntax.comment(format_section_line(record.name)),
            )
        document.rebuild_index()
        return True
