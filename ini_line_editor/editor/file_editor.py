"""Éditeur de fichier INI préservant le format.

Le document est chargé à la construction et conservé pendant toute la
vie de l'instance. Chaque écriture modifie les lignes en mémoire,
reconstruit l'index des sections et réécrit le fichier entier.
Aucun verrou n'est posé : deux instances sur le même fichier ne se
coordonnent pas, la dernière écriture l'emporte.
"""

from pathlib import Path

from ini_line_editor.config.settings import EditorSettings
from ini_line_editor.document.document import IniDocument
from ini_line_editor.document.mutator import Mutator
from ini_line_editor.editor.base import IniEditor
from ini_line_editor.errors.exceptions import (
    EntryNotFoundError,
    IniFileMissingError,
    PersistenceError,
)
from ini_line_editor.filesystem.base import LineFileStore
from ini_line_editor.filesystem.text_store import TextLineFileStore
from ini_line_editor.logging.base import Logger
from ini_line_editor.logging.std_logger import StdLogger


class IniFileEditor(IniEditor):
    """Éditeur d'un fichier INI sur disque.

    Attributes:
        path: Chemin du fichier INI.
        settings: Paramètres de l'éditeur.
        logger: Instance de Logger pour tracer les opérations.

    Example:
        >>> editor = IniFileEditor(Path("/etc/app/app.ini"))
        >>> editor.write_value("network", "port", "8080")
        >>> editor.get_value("network", "port")
        '8080'
        >>> editor.comment_key("network", "port")
        True
    """

    def __init__(
        self,
        path: str | Path,
        settings: EditorSettings | None = None,
        logger: Logger | None = None,
        file_store: LineFileStore | None = None,
    ) -> None:
        """Initialise l'éditeur et charge le document.

        Args:
            path: Chemin du fichier INI (peut ne pas encore exister).
            settings: Paramètres, EditorSettings() par défaut.
            logger: Logger injectable, StdLogger par défaut.
            file_store: Persistance injectable, TextLineFileStore
                par défaut.
        """
        self.path = Path(path)
        self.settings = settings or EditorSettings()
        self.logger = logger or StdLogger()
        self._store = file_store or TextLineFileStore(
            self.logger,
            encoding=self.settings.encoding,
            newline=self.settings.newline,
        )
        self._document = IniDocument(
            self._load_lines(),
            syntax=self.settings.comment_syntax(),
            comparison=self.settings.comparison,
        )
        self._mutator = Mutator(self._document)

    def _load_lines(self) -> list[str]:
        if not self._store.exists(self.path):
            self.logger.log_warning(
                f"Fichier {self.path} inexistant : document vide."
            )
            return []
        lines = self._store.read_lines(self.path)
        self.logger.log_info(
            f"Fichier {self.path} chargé ({len(lines)} lignes)."
        )
        return lines

    def _file_exists(self) -> bool:
        return self._store.exists(self.path)

    def _commit(self, previous: list[str]) -> None:
        """Persiste le document ; en cas d'échec, revient à ``previous``.

        Raises:
            PersistenceError: Si la réécriture du fichier échoue.
        """
        try:
            self._store.write_lines(self.path, self._document.lines.snapshot())
        except PersistenceError:
            self._document.restore(previous)
            self.logger.log_warning(
                f"Modification de {self.path} annulée en mémoire."
            )
            raise

    @property
    def lines(self) -> list[str]:
        """Copie des lignes courantes du document."""
        return self._document.lines.snapshot()

    def sections(self, include_commented: bool = False) -> list[str]:
        """Liste les sections du document, dans l'ordre.

        Args:
            include_commented: Inclure les sections commentées.
        """
        return self._document.section_names(include_commented)

    def has_section(self, section: str, include_commented: bool = False) -> bool:
        """Indique si la section existe (et est active, par défaut)."""
        record = self._document.locator().find_section(section)
        if record is None:
            return False
        return include_commented or not record.is_commented

    def read_value(
        self, section: str, key: str, default: str | None = None
    ) -> str | None:
        if not self._file_exists():
            return default
        value = self._document.lookup(section, key)
        return default if value is None else value

    def get_value(self, section: str, key: str) -> str:
        if not self._file_exists():
            raise IniFileMissingError(self.path)
        value = self._document.lookup(section, key)
        if value is None:
            raise EntryNotFoundError(section, key)
        return value

    def read_all(self) -> dict[str, dict[str, str]]:
        if not self._file_exists():
            raise IniFileMissingError(self.path)
        return self._document.to_dict()

    def write_value(self, section: str, key: str, value: str) -> None:
        previous = self._document.lines.snapshot()
        self._mutator.write_value(section, key, value)
        self._commit(previous)
        self.logger.log_info(
            f"[{section}] {key} écrit dans {self.path}."
        )

    def comment_key(self, section: str, key: str) -> bool:
        if not self._file_exists():
            self.logger.log_debug(
                f"Fichier {self.path} inexistant : rien à commenter."
            )
            return False
        previous = self._document.lines.snapshot()
        if not self._mutator.comment_key(section, key):
            self.logger.log_debug(
                f"[{section}] {key} absent ou déjà commenté dans {self.path}."
            )
            return False
        self._commit(previous)
        self.logger.log_info(f"[{section}] {key} commenté dans {self.path}.")
        return True

    def __repr__(self) -> str:
        return f"IniFileEditor({str(self.path)!r})"
