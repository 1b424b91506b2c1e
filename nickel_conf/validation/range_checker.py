"""Validateur d'entiers bornés."""

from typing import Any

from nickel_conf.errors.exceptions import ValidationError
from nickel_conf.validation.base import Validator


class IntegerRangeValidator(Validator):
    """
    Vérifie qu'une valeur est un entier compris dans un intervalle
    fermé [minimum, maximum].

    Les booléens sont refusés bien que bool hérite de int.
    """

    def __init__(self, label: str, minimum: int, maximum: int) -> None:
        """
        Initialise le validateur.

        Args:
            label: Nom de la valeur, repris dans les messages d'erreur
            minimum: Borne inférieure incluse
            maximum: Borne supérieure incluse
        """
        if minimum > maximum:
            raise ValueError(
                f"Intervalle vide pour {label}: [{minimum}, {maximum}]"
            )
        self.label = label
        self.minimum = minimum
        self.maximum = maximum

    def validate(self, value: Any) -> None:
        """
        Valide le type puis les bornes.

        Raises:
            ValidationError: Si la valeur n'est pas un entier ou
                sort de l'intervalle
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError(
                f"Mauvais type pour {self.label} : entier attendu, "
                f"reçu {type(value).__name__}"
            )
        if not self.minimum <= value <= self.maximum:
            raise ValidationError(
                f"Mauvaise valeur pour {self.label} : {value} hors de "
                f"[{self.minimum}, {self.maximum}]"
            )
