"""Interface abstraite pour la lecture/écriture ligne à ligne des fichiers."""

from abc import ABC, abstractmethod
from pathlib import Path


class LineFileStore(ABC):
    """Interface pour la persistance d'un document sous forme de lignes."""

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """
        Vérifie si un fichier existe.

        Args:
            path: Chemin du fichier

        Returns:
            True si le fichier existe, False sinon
        """
        pass

    @abstractmethod
    def read_lines(self, path: Path) -> list[str]:
        """
        Lit un fichier et retourne ses lignes sans terminaison.

        Args:
            path: Chemin du fichier

        Returns:
            Lignes du fichier, dans l'ordre

        Raises:
            FileNotFoundError: Si le fichier n'existe pas
        """
        pass

    @abstractmethod
    def write_lines(self, path: Path, lines: list[str]) -> None:
        """
        Réécrit entièrement un fichier avec les lignes fournies.

        Args:
            path: Chemin du fichier
            lines: Lignes à écrire, sans terminaison
        """
        pass
