"""Machine à états du parcours séquentiel des sections."""

import re
from enum import Enum

from nickel_conf.dotconf.patterns import is_section_header


class ScanState(Enum):
    """Position du parcours par rapport à la section cible."""

    OUTSIDE_TARGET = "outside_target"
    INSIDE_TARGET = "inside_target"


class SectionScanner:
    """Suit l'entrée et la sortie de la section cible ligne par ligne.

    Transitions, uniquement sur les lignes d'en-tête :
    - en-tête de la section cible -> INSIDE_TARGET
    - tout autre en-tête -> OUTSIDE_TARGET

    Les sections ne sont pas imbriquées ; une section court jusqu'au
    prochain en-tête ou jusqu'à la fin du fichier.
    """

    def __init__(self, section_pattern: re.Pattern[str]) -> None:
        self.section_pattern = section_pattern
        self.state = ScanState.OUTSIDE_TARGET
        self.entered = False

    @property
    def inside(self) -> bool:
        return self.state is ScanState.INSIDE_TARGET

    def feed(self, line: str) -> bool:
        """Fait avancer la machine sur une ligne.

        Args:
            line: Ligne sans son terminateur.

        Returns:
            True si la ligne est un en-tête de section.
        """
        if self.section_pattern.match(line):
            self.state = ScanState.INSIDE_TARGET
            self.entered = True
            return True
        if is_section_header(line):
            self.state = ScanState.OUTSIDE_TARGET
            return True
        return False

    def closes_target(self, line: str) -> bool:
        """Indique si la ligne termine la section cible en cours."""
        return self.inside and is_section_header(line)
