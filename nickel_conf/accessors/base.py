"""Interface commune des accesseurs typés."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from nickel_conf.dotconf.base import SectionKeyManager
from nickel_conf.dotconf.binding import KeyBinding
from nickel_conf.validation.base import Validator

T = TypeVar("T")


class TypedAccessor(ABC, Generic[T]):
    """Lie une clé du fichier à un type Python.

    Le setter valide la valeur avant de déléguer au moteur ; le getter
    convertit la chaîne lue. Une clé absente donne None, ce qui
    distingue « non renseigné » de « zéro » ou « faux ».

    Attributes:
        manager: Moteur de lecture/écriture.
        binding: Clé gérée par cet accesseur.
        validator: Contrôle appliqué avant toute écriture.
    """

    def __init__(
        self,
        manager: SectionKeyManager,
        binding: KeyBinding,
        validator: Validator,
    ) -> None:
        self.manager = manager
        self.binding = binding
        self.validator = validator

    @property
    def key(self) -> str:
        return self.binding.key

    @abstractmethod
    def coerce(self, raw: str) -> T:
        """Convertit la valeur lue dans le fichier."""
        pass

    @abstractmethod
    def format(self, value: T) -> str:
        """Convertit une valeur Python en texte à écrire."""
        pass

    def get(self) -> T | None:
        """Lit la valeur typée, ou None si la clé est absente."""
        raw = self.manager.get(self.binding)
        if raw is None:
            return None
        return self.coerce(raw)

    def set(self, value: T) -> bool:
        """Valide puis écrit la valeur.

        Raises:
            ValidationError: Si la valeur est refusée ; le fichier
                n'est alors pas ouvert.
        """
        self.validator.validate(value)
        return self.manager.set(self.binding, self.format(value))
