"""Expressions régulières des lignes du fichier de configuration Nickel.

Une ligne d'en-tête de section a la forme ``[Nom]`` (espaces finaux
tolérés). Une ligne clé/valeur a la forme ``Cle = valeur`` où la
grammaire de la valeur dépend de la clé.
"""

import re

# Grammaires de valeurs
INTEGER_VALUE = r"[0-9]+"
ANY_VALUE = r".+?"
LOWERCASE_WORD_VALUE = r"[a-z]+"

ANY_SECTION_RE = re.compile(r"^\[.*\]\s*$")


def section_header_pattern(section: str) -> re.Pattern[str]:
    """Compile le motif de l'en-tête d'une section précise.

    Args:
        section: Nom de la section, sans crochets.

    Returns:
        Motif ancré reconnaissant ``[section]``.
    """
    return re.compile(rf"^\[{re.escape(section)}\]\s*$")


def key_value_pattern(key: str, value_grammar: str) -> re.Pattern[str]:
    """Compile le motif d'une ligne ``key=value``.

    La valeur est capturée dans le groupe 1. Les espaces autour de
    ``=`` et en fin de ligne sont tolérés.

    Args:
        key: Nom exact de la clé (sensible à la casse).
        value_grammar: Expression régulière de la valeur.

    Returns:
        Motif ancré de la ligne.
    """
    return re.compile(rf"^{re.escape(key)}\s*=\s*({value_grammar})\s*$")


def is_section_header(line: str) -> bool:
    """Indique si une ligne est un en-tête de section quelconque."""
    return ANY_SECTION_RE.match(line) is not None
