"""Fonctions de chargement de configuration."""

import json
import tomllib
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from pydantic import BaseModel


class ConfigLoader(ABC):
    """
    Interface abstraite pour le chargement de configuration.

    Permet l'injection de dépendance et facilite les tests
    en permettant de substituer l'implémentation réelle par un mock.
    """

    @abstractmethod
    def load(
        self,
        config_path: str | Path,
        schema: type[BaseModel] | None = None
    ) -> dict[str, Any] | BaseModel:
        """
        Charge un fichier de configuration.

        Args:
            config_path: Chemin vers le fichier de configuration
            schema: Classe Pydantic BaseModel optionnelle pour
                validation. Si fourni, retourne une instance
                du modèle. Si None, retourne un dict brut.

        Returns:
            Dictionnaire de configuration ou instance du schema

        Raises:
            FileNotFoundError: Si le fichier n'existe pas
            ValueError: Si le format n'est pas supporté
            TypeError: Si schema n'est pas un BaseModel
        """
        pass


class FileConfigLoader(ConfigLoader):
    """
    Chargeur de configuration depuis fichiers TOML ou JSON,
    détectés par l'extension, avec validation Pydantic optionnelle.
    """

    def load(
        self,
        config_path: str | Path,
        schema: type[BaseModel] | None = None
    ) -> dict[str, Any] | BaseModel:
        path = Path(config_path)

        if not path.exists():
            raise FileNotFoundError(
                f"Fichier de configuration non trouvé: {path}"
            )

        raw_config = self.read_raw(path)

        if schema is None:
            return raw_config

        return self.validate_with_schema(raw_config, schema)

    @staticmethod
    def read_raw(path: Path) -> dict[str, Any]:
        """Lit un fichier TOML ou JSON en dictionnaire brut.

        Raises:
            ValueError: Si l'extension n'est pas supportée.
        """
        suffix = path.suffix.lower()

        if suffix == ".toml":
            with open(path, "rb") as f:
                return tomllib.load(f)
        if suffix == ".json":
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        raise ValueError(
            f"Extension non supportée: {suffix}. "
            "Utilisez .toml ou .json"
        )

    @staticmethod
    def validate_with_schema(
        data: dict[str, Any], schema: type[BaseModel]
    ) -> BaseModel:
        """Valide un dict via un modèle Pydantic.

        Args:
            data: Dictionnaire brut à valider.
            schema: Classe Pydantic BaseModel.

        Returns:
            Instance du modèle validé.

        Raises:
            TypeError: Si schema n'est pas un BaseModel.
            pydantic.ValidationError: Si les données sont invalides.
        """
        if not (
            isinstance(schema, type)
            and issubclass(schema, BaseModel)
        ):
            raise TypeError(
                f"Le schema doit être une sous-classe de "
                f"pydantic.BaseModel, reçu: {schema}"
            )

        return schema.model_validate(data)
