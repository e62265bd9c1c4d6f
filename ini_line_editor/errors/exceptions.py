"""
Exceptions de l'éditeur INI.

Les lignes mal formées ne lèvent jamais d'erreur : elles sont ignorées
par l'analyse. Seuls l'absence de fichier, l'absence d'entrée en lecture
stricte, une configuration invalide et l'échec d'écriture sont signalés.
"""


class IniEditorError(Exception):
    """Exception de base de l'éditeur INI."""
    pass


class IniFileMissingError(IniEditorError, FileNotFoundError):
    """Le fichier INI n'existe pas (lecture stricte ou lecture globale)."""

    def __init__(self, path: object) -> None:
        self.path = path
        super().__init__(f"Le fichier {path} n'existe pas.")

    def __str__(self) -> str:
        return self.args[0]


class EntryNotFoundError(IniEditorError, KeyError):
    """La clé ou sa section est absente ou commentée."""

    def __init__(self, section: str, key: str) -> None:
        self.section = section
        self.key = key
        super().__init__(
            f"Aucune valeur pour la clé '{key}' dans la section '{section}'."
        )

    def __str__(self) -> str:
        return self.args[0]


class SettingsError(IniEditorError, ValueError):
    """Paramètres de l'éditeur invalides."""
    pass


class PersistenceError(IniEditorError, OSError):
    """La réécriture du fichier INI a échoué."""
    pass
