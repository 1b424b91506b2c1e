"""Modèle des réglages d'exécution de nickel_conf."""

from pathlib import Path
from typing import Any, Dict, Literal

from pydantic import BaseModel, field_validator

from nickel_conf.dotconf.manager import DEFAULT_CONF_PATH

DEFAULT_LOG_FILE = "/tmp/nickel_conf.log"


class NickelConfSettings(BaseModel):
    """Réglages chargés depuis un fichier TOML ou JSON.

    Attributes:
        conf_path: Chemin du fichier ``Kobo eReader.conf``.
        log_file: Fichier de log de la bibliothèque.
        log_level: Niveau minimal des messages journalisés.
        console_output: Recopier les logs sur la console.
    """

    conf_path: Path = DEFAULT_CONF_PATH
    log_file: str = DEFAULT_LOG_FILE
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    console_output: bool = False

    model_config = {"extra": "forbid"}

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v

    def logging_config(self) -> Dict[str, Any]:
        """Configuration attendue par FileLogger."""
        return {"logging": {"level": self.log_level}}
