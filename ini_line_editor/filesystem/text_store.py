"""Implémentation texte de la persistance ligne à ligne."""

from pathlib import Path

from ini_line_editor.errors.exceptions import PersistenceError
from ini_line_editor.filesystem.base import LineFileStore
from ini_line_editor.logging.base import Logger


class TextLineFileStore(LineFileStore):
    """
    Lit et réécrit des fichiers texte ligne à ligne.

    La lecture se fait en mode « universal newlines » : les fins de ligne
    \\n, \\r\\n et \\r sont reconnues. L'écriture termine chaque ligne par
    ``newline`` ; un document vide produit un fichier vide.
    """

    def __init__(
        self,
        logger: Logger,
        encoding: str = "utf-8",
        newline: str = "\n",
    ) -> None:
        """
        Initialise le stockage.

        Args:
            logger: Instance de Logger pour le logging
            encoding: Encodage des fichiers
            newline: Terminaison écrite après chaque ligne
        """
        self.logger = logger
        self.encoding = encoding
        self.newline = newline

    def exists(self, path: Path) -> bool:
        return Path(path).is_file()

    def read_lines(self, path: Path) -> list[str]:
        """
        Lit les lignes d'un fichier.

        Raises:
            FileNotFoundError: Si le fichier n'existe pas
            UnicodeDecodeError: Si l'encodage ne correspond pas
        """
        with open(path, "r", encoding=self.encoding) as f:
            lines = [line.rstrip("\n") for line in f]
        self.logger.log_debug(f"Fichier {path} lu : {len(lines)} lignes.")
        return lines

    def write_lines(self, path: Path, lines: list[str]) -> None:
        """
        Réécrit un fichier en entier.

        Raises:
            PersistenceError: Si l'écriture échoue
        """
        content = "".join(f"{line}{self.newline}" for line in lines)
        try:
            with open(path, "w", encoding=self.encoding, newline="") as f:
                f.write(content)
        except OSError as e:
            self.logger.log_error(
                f"Erreur lors de l'écriture du fichier {path}: {e}"
            )
            raise PersistenceError(
                f"Impossible d'écrire le fichier {path}: {e}"
            ) from e
        self.logger.log_debug(f"Fichier {path} écrit : {len(lines)} lignes.")
