"""Paramètres de l'éditeur INI et leur chargement depuis TOML/JSON.

Exemple de table dans un fichier ``editor.toml`` :

    [editor]
    comment_markers = [";", "/", "#"]
    write_marker = "#"
    comparison = "ignore_case"
"""

from pathlib import Path
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    ValidationError,
    field_validator,
    model_validator,
)

from ini_line_editor.config.loader import ConfigLoader, FileConfigLoader
from ini_line_editor.document.lines import CommentSyntax
from ini_line_editor.document.locator import NameComparison
from ini_line_editor.errors.exceptions import SettingsError

_FORBIDDEN_MARKERS = frozenset("[]=")


class EditorSettings(BaseModel):
    """Paramètres immuables d'un éditeur INI.

    Attributes:
        comment_markers: Caractères de commentaire reconnus en tête de ligne.
        write_marker: Caractère utilisé pour commenter une clé.
        comparison: Comparaison des noms de sections et de clés.
        encoding: Encodage du fichier INI.
        newline: Terminaison de ligne écrite lors de la réécriture.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    comment_markers: tuple[str, ...] = (";", "/")
    write_marker: str = ";"
    comparison: NameComparison = NameComparison.ORDINAL
    encoding: str = "utf-8"
    newline: str = "\n"

    @field_validator("comment_markers")
    @classmethod
    def check_markers(cls, markers: tuple[str, ...]) -> tuple[str, ...]:
        if not markers:
            raise ValueError("au moins un marqueur de commentaire est requis")
        for marker in markers:
            if len(marker) != 1 or marker.isspace():
                raise ValueError(
                    f"marqueur {marker!r} : un seul caractère visible attendu"
                )
            if marker in _FORBIDDEN_MARKERS:
                raise ValueError(f"marqueur {marker!r} réservé à la syntaxe INI")
        return tuple(dict.fromkeys(markers))

    @field_validator("newline")
    @classmethod
    def check_newline(cls, newline: str) -> str:
        if newline not in ("\n", "\r\n"):
            raise ValueError("newline doit valoir '\\n' ou '\\r\\n'")
        return newline

    @model_validator(mode="after")
    def check_write_marker(self) -> "EditorSettings":
        if self.write_marker not in self.comment_markers:
            raise ValueError(
                f"write_marker {self.write_marker!r} absent de comment_markers"
            )
        return self

    def comment_syntax(self) -> CommentSyntax:
        """Construit la syntaxe de commentaire correspondante."""
        return CommentSyntax(self.comment_markers, self.write_marker)


def load_settings(
    config_path: str | Path,
    section: str = "editor",
    config_loader: ConfigLoader | None = None,
) -> EditorSettings:
    """Charge les paramètres de l'éditeur depuis un fichier TOML ou JSON.

    Args:
        config_path: Chemin du fichier de configuration.
        section: Table contenant les paramètres ; absente, les valeurs
            par défaut s'appliquent.
        config_loader: Chargeur injectable, FileConfigLoader par défaut.

    Returns:
        Paramètres validés.

    Raises:
        FileNotFoundError: Si le fichier n'existe pas.
        SettingsError: Si les paramètres sont invalides.
    """
    loader = config_loader or FileConfigLoader()
    raw: dict[str, Any] = loader.load(config_path)
    data = raw.get(section, {})
    if not isinstance(data, dict):
        raise SettingsError(
            f"La section '{section}' de {config_path} doit être une table."
        )
    try:
        return EditorSettings.model_validate(data)
    except ValidationError as e:
        raise SettingsError(
            f"Paramètres invalides dans {config_path} : {e}"
        ) from e
