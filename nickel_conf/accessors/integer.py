"""Accesseur de valeurs entières."""

from nickel_conf.accessors.base import TypedAccessor
from nickel_conf.dotconf.base import SectionKeyManager
from nickel_conf.dotconf.binding import KeyBinding
from nickel_conf.validation.base import Validator


class IntegerAccessor(TypedAccessor[int]):
    """Accesseur pour une clé entière, avec valeur par défaut optionnelle.

    Si ``default`` est fourni, une lecture sur clé absente écrit cette
    valeur dans le fichier puis la retourne.
    """

    def __init__(
        self,
        manager: SectionKeyManager,
        binding: KeyBinding,
        validator: Validator,
        default: int | None = None,
    ) -> None:
        super().__init__(manager, binding, validator)
        if default is not None:
            validator.validate(default)
        self.default = default

    def coerce(self, raw: str) -> int:
        return int(raw)

    def format(self, value: int) -> str:
        return str(value)

    def get(self) -> int | None:
        value = super().get()
        if value is None and self.default is not None:
            self.set(self.default)
            return self.default
        return value
