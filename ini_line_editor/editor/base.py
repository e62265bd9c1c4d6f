"""Interface abstraite d'un éditeur de fichier INI préservant le format.

Tableau des comportements face aux absences :

=====================  ===============  ================  ==============
Opération              Fichier absent   Section/clé       Entrée
                                        absente           commentée
=====================  ===============  ================  ==============
get_value              exception        exception         exception
read_value             défaut           défaut            défaut
read_all               exception        ignorée           ignorée
write_value            création         création          réactivation
comment_key            sans effet       sans effet        sans effet
=====================  ===============  ================  ==============
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping


class IniEditor(ABC):
    """Interface pour la lecture et l'édition en place d'un fichier INI.

    Toute ligne non concernée par une écriture est conservée à l'octet
    près, dans son ordre d'origine.
    """

    @abstractmethod
    def get_value(self, section: str, key: str) -> str:
        """Lit une valeur active, strictement.

        Args:
            section: Nom de la section.
            key: Nom de la clé.

        Returns:
            Valeur sans espaces autour.

        Raises:
            IniFileMissingError: Si le fichier n'existe pas.
            EntryNotFoundError: Si la section ou la clé est absente
                ou commentée.
        """
        pass

    @abstractmethod
    def read_value(
        self, section: str, key: str, default: str | None = None
    ) -> str | None:
        """Lit une valeur active, ou retourne ``default``.

        Args:
            section: Nom de la section.
            key: Nom de la clé.
            default: Valeur retournée si rien n'est trouvé.

        Returns:
            Valeur trouvée ou ``default``.
        """
        pass

    @abstractmethod
    def read_all(self) -> dict[str, dict[str, str]]:
        """Lit toutes les sections et clés actives.

        Returns:
            Dictionnaire imbriqué {section: {clé: valeur}}.

        Raises:
            IniFileMissingError: Si le fichier n'existe pas.
        """
        pass

    @abstractmethod
    def write_value(self, section: str, key: str, value: str) -> None:
        """Écrit une valeur en créant la section ou la clé si besoin.

        Args:
            section: Nom de la section.
            key: Nom de la clé.
            value: Nouvelle valeur.
        """
        pass

    @abstractmethod
    def comment_key(self, section: str, key: str) -> bool:
        """Commente une clé active (et sa section si elle devient vide).

        Returns:
            True si le fichier a été modifié, False sinon.
        """
        pass

    def try_get_value(self, section: str, key: str) -> tuple[bool, str | None]:
        """Lit une valeur sans lever d'exception.

        Returns:
            (True, valeur) si trouvée, (False, None) sinon.
        """
        value = self.read_value(section, key)
        return value is not None, value

    def update_section(self, section: str, values: Mapping[str, str]) -> bool:
        """Écrit plusieurs clés d'une section, seulement si elles diffèrent.

        Args:
            section: Nom de la section.
            values: Paires clé=valeur cibles.

        Returns:
            True si au moins une clé a été écrite, False sinon.
        """
        updated = False
        for key, value in values.items():
            if self.read_value(section, key) == value:
                continue
            self.write_value(section, key, value)
            updated = True
        return updated
