"""Module DotConf : accès à une clé dans une section d'un fichier INI.

Ce module fournit un moteur ligne à ligne pour lire ou réécrire une
seule clé ``key=value`` à l'intérieur d'une section ``[Nom]``, en
préservant tout le reste du fichier :
- KeyBinding : description immuable d'une clé (nom, grammaire, section)
- SectionScanner : machine à états OUTSIDE_TARGET / INSIDE_TARGET
- LineStore : préfixe de lignes réécrites + reliquat brut
- LinuxSectionKeyManager : lecture/réécriture sur fichier local

Example:
    >>> from nickel_conf.dotconf import (
    ...     KeyBinding, LinuxSectionKeyManager, INTEGER_VALUE
    ... )
    >>> from nickel_conf import FileLogger
    >>>
    >>> binding = KeyBinding("FrontLightLevel", INTEGER_VALUE,
    ...                      "PowerOptions")
    >>> manager = LinuxSectionKeyManager(
    ...     FileLogger("/tmp/nickel_conf.log"), "/tmp/eReader.conf"
    ... )
    >>> manager.set(binding, "40")
    True
"""

from nickel_conf.dotconf.base import SectionKeyManager
from nickel_conf.dotconf.binding import KeyBinding
from nickel_conf.dotconf.line_store import LineStore
from nickel_conf.dotconf.manager import (
    DEFAULT_CONF_PATH,
    LinuxSectionKeyManager,
)
from nickel_conf.dotconf.patterns import (
    ANY_VALUE,
    INTEGER_VALUE,
    LOWERCASE_WORD_VALUE,
    is_section_header,
    key_value_pattern,
    section_header_pattern,
)
from nickel_conf.dotconf.scanner import ScanState, SectionScanner

__all__ = [
    # Interface abstraite
    "SectionKeyManager",
    # Implémentation
    "LinuxSectionKeyManager",
    "DEFAULT_CONF_PATH",
    # Structures
    "KeyBinding",
    "LineStore",
    "ScanState",
    "SectionScanner",
    # Motifs
    "ANY_VALUE",
    "INTEGER_VALUE",
    "LOWERCASE_WORD_VALUE",
    "is_section_header",
    "key_value_pattern",
    "section_header_pattern",
]
