"""Accesseur de valeurs booléennes."""

from nickel_conf.accessors.base import TypedAccessor

TRUE_LITERAL = "true"
FALSE_LITERAL = "false"


class BooleanAccessor(TypedAccessor[bool]):
    """Accesseur pour une clé ``true``/``false``.

    Toute valeur lue autre que ``true`` vaut False.
    """

    def coerce(self, raw: str) -> bool:
        return raw == TRUE_LITERAL

    def format(self, value: bool) -> str:
        return TRUE_LITERAL if value else FALSE_LITERAL
