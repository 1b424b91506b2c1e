"""Fonctions de chargement des réglages."""

import json
import tomllib
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from nickel_conf.config.settings import NickelConfSettings
from nickel_conf.errors.exceptions import (
    ConfigurationError,
    FileConfigurationError,
)


class ConfigLoader(ABC):
    """
    Interface abstraite pour le chargement de configuration.

    Permet l'injection de dépendance et facilite les tests
    en permettant de substituer l'implémentation réelle par un mock.
    """

    @abstractmethod
    def load(
        self,
        config_path: Union[str, Path],
        schema: type[BaseModel] | None = None
    ) -> Union[Dict[str, Any], BaseModel]:
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
            FileConfigurationError: Si le fichier est absent ou
                d'un format non supporté
            ConfigurationError: Si le contenu est invalide
        """
        pass


class FileConfigLoader(ConfigLoader):
    """
    Implémentation du chargeur de configuration depuis fichiers.

    Supporte les formats TOML et JSON, détectés automatiquement
    par l'extension du fichier, avec validation optionnelle via
    un modèle Pydantic.
    """

    def load(
        self,
        config_path: Union[str, Path],
        schema: type[BaseModel] | None = None
    ) -> Union[Dict[str, Any], BaseModel]:
        """
        Charge un fichier de configuration TOML ou JSON.

        Args:
            config_path: Chemin vers le fichier de configuration
            schema: Classe Pydantic BaseModel optionnelle

        Returns:
            Dictionnaire de configuration ou instance du schema

        Raises:
            FileConfigurationError: Si le fichier n'existe pas ou si
                l'extension n'est pas supportée
            ConfigurationError: Si le fichier est mal formé ou ne
                respecte pas le schema
        """
        path = Path(config_path)

        if not path.exists():
            raise FileConfigurationError(
                f"Fichier de configuration non trouvé: {path}"
            )

        suffix = path.suffix.lower()

        try:
            if suffix == ".toml":
                with open(path, "rb") as f:
                    raw_config = tomllib.load(f)
            elif suffix == ".json":
                with open(path, "r", encoding="utf-8") as f:
                    raw_config = json.load(f)
            else:
                raise FileConfigurationError(
                    f"Extension non supportée: {suffix}. "
                    "Utilisez .toml ou .json"
                )
        except (tomllib.TOMLDecodeError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                f"Fichier de configuration mal formé {path}: {e}"
            ) from e

        if schema is None:
            return raw_config

        return self._validate_with_schema(raw_config, schema)

    @staticmethod
    def _validate_with_schema(
        data: Dict[str, Any], schema: type[BaseModel]
    ) -> BaseModel:
        """Valide un dict via un modèle Pydantic.

        Args:
            data: Dictionnaire brut à valider.
            schema: Classe Pydantic BaseModel.

        Returns:
            Instance du modèle validé.

        Raises:
            TypeError: Si schema n'est pas un BaseModel.
            ConfigurationError: Si la validation échoue.
        """
        if not (
            isinstance(schema, type)
            and issubclass(schema, BaseModel)
        ):
            raise TypeError(
                f"Le schema doit être une sous-classe de "
                f"pydantic.BaseModel, reçu: {schema}"
            )

        try:
            return schema.model_validate(data)
        except PydanticValidationError as e:
            raise ConfigurationError(
                f"Configuration invalide: {e}"
            ) from e


def load_settings(
    config_path: Union[str, Path, None] = None,
    loader: ConfigLoader | None = None,
) -> NickelConfSettings:
    """
    Charge les réglages de nickel_conf.

    Sans chemin, retourne les réglages par défaut.

    Args:
        config_path: Fichier TOML ou JSON optionnel
        loader: Chargeur injectable (FileConfigLoader par défaut)

    Returns:
        Réglages validés
    """
    if config_path is None:
        return NickelConfSettings()
    loader = loader or FileConfigLoader()
    return loader.load(config_path, NickelConfSettings)
