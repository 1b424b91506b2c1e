"""Interface abstraite pour la validation."""

from abc import ABC, abstractmethod
from typing import Any


class Validator(ABC):
    """
    Interface abstraite pour les validateurs de valeurs.

    Un validateur est appelé par un setter avant toute entrée/sortie
    fichier : une valeur refusée interrompt l'opération.
    """

    @abstractmethod
    def validate(self, value: Any) -> None:
        """
        Valide une valeur.

        Args:
            value: Valeur à valider

        Raises:
            ValidationError: Si la valeur est refusée
        """
        pass
