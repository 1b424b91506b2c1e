"""Validateur de booléens."""

from typing import Any

from nickel_conf.errors.exceptions import ValidationError
from nickel_conf.validation.base import Validator


class BooleanTypeValidator(Validator):
    """Vérifie qu'une valeur est strictement un booléen."""

    def __init__(self, label: str) -> None:
        self.label = label

    def validate(self, value: Any) -> None:
        """
        Raises:
            ValidationError: Si la valeur n'est pas un bool
        """
        if not isinstance(value, bool):
            raise ValidationError(
                f"Mauvais type pour {self.label} : booléen attendu, "
                f"reçu {type(value).__name__}"
            )
