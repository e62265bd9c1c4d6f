"""Stockage des lignes brutes et utilitaires de commentaires.

Ce module fournit :
- CommentSyntax : jeu de marqueurs de commentaire et classification
  des lignes (vide, commentée, contenu)
- LineStore : séquence ordonnée et mutable des lignes d'un document
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


def is_blank(line: str) -> bool:
    """Indique si une ligne est vide ou ne contient que des espaces."""
    return not line.strip()


@dataclass(frozen=True)
class CommentSyntax:
    """Marqueurs de commentaire reconnus et marqueur d'écriture.

    Attributes:
        markers: Caractères qui, en tête de ligne, la désactivent.
        write_marker: Caractère utilisé pour commenter une ligne.
    """

    markers: tuple[str, ...] = (";", "/")
    write_marker: str = ";"

    def __post_init__(self) -> None:
        if not self.markers:
            raise ValueError("Au moins un marqueur de commentaire est requis")
        if self.write_marker not in self.markers:
            raise ValueError(
                f"Marqueur d'écriture {self.write_marker!r} absent "
                f"des marqueurs {self.markers}"
            )

    @property
    def _chars(self) -> str:
        return "".join(self.markers)

    def is_commented(self, line: str) -> bool:
        """Indique si la ligne (une fois nettoyée) commence par un marqueur."""
        return line.strip().startswith(self.markers)

    def is_blank_or_fully_commented(self, line: str) -> bool:
        """Indique si la ligne entière est vide ou du commentaire.

        Args:
            line: Ligne brute.

        Returns:
            True si la ligne est vide ou commentée.
        """
        return is_blank(line) or self.is_commented(line)

    def strip_comment_prefix(self, line: str) -> str:
        """Retire les marqueurs de tête et les espaces d'une ligne.

        Seul le contenu logique est exposé ; la ligne d'origine reste
        celle qui est stockée.

        Args:
            line: Ligne brute.

        Returns:
            Contenu logique de la ligne.
        """
        return line.strip().lstrip(self._chars).strip()

    def comment(self, content: str) -> str:
        """Construit la forme commentée canonique d'un contenu."""
        return f"{self.write_marker} {content}"


class LineStore:
    """Séquence ordonnée des lignes brutes d'un document.

    Aucune ligne n'est jamais supprimée : seules les opérations
    de remplacement, d'insertion et d'ajout en fin sont offertes.
    """

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self._lines: list[str] = list(lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __getitem__(self, index: int) -> str:
        return self._lines[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)

    def __repr__(self) -> str:
        return f"LineStore({len(self._lines)} lignes)"

    def replace(self, index: int, line: str) -> None:
        """Remplace la ligne à l'index donné.

        Raises:
            IndexError: Si l'index est hors du document.
        """
        if not 0 <= index < len(self._lines):
            raise IndexError(f"Ligne {index} hors du document")
        self._lines[index] = line

    def insert(self, index: int, line: str) -> None:
        """Insère une ligne avant l'index donné (ajout en fin si index == len)."""
        if not 0 <= index <= len(self._lines):
            raise IndexError(f"Position d'insertion {index} hors du document")
        self._lines.insert(index, line)

    def append(self, *lines: str) -> None:
        """Ajoute une ou plusieurs lignes en fin de document."""
        self._lines.extend(lines)

    def snapshot(self) -> list[str]:
        """Retourne une copie des lignes courantes."""
        return list(self._lines)
