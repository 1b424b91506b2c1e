"""Description statique d'une clé gérée par le moteur."""

import re
from dataclasses import dataclass, field

from nickel_conf.dotconf.patterns import (
    key_value_pattern,
    section_header_pattern,
)


@dataclass(frozen=True)
class KeyBinding:
    """Association immuable d'une clé, de sa grammaire et de sa section.

    Attributes:
        key: Nom de la clé tel qu'écrit dans le fichier.
        value_grammar: Expression régulière de la valeur capturée.
        section: Section propriétaire de la clé.
        create_if_missing: Si False, une écriture sur une clé absente
            ne modifie pas le fichier.
    """

    key: str
    value_grammar: str
    section: str
    create_if_missing: bool = True
    pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)
    section_pattern: re.Pattern[str] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("Le nom de clé ne peut pas être vide")
        if not self.section:
            raise ValueError("Le nom de section ne peut pas être vide")
        object.__setattr__(
            self, "pattern", key_value_pattern(self.key, self.value_grammar)
        )
        object.__setattr__(
            self, "section_pattern", section_header_pattern(self.section)
        )

    def match(self, line: str) -> str | None:
        """Retourne la valeur capturée si la ligne porte cette clé."""
        found = self.pattern.match(line)
        return found.group(1) if found else None

    def format_line(self, value: str) -> str:
        """Construit la ligne ``key=value`` écrite dans le fichier."""
        return f"{self.key}={value}"

    def header_line(self) -> str:
        """Construit la ligne d'en-tête de la section propriétaire."""
        return f"[{self.section}]"
