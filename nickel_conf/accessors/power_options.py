"""Réglages de la section [PowerOptions] du fichier Nickel.

Ce module décrit les quatre clés gérées (éclairage frontal et
température de couleur) et expose NickelConf, qui regroupe leurs
accesseurs typés autour d'un même moteur.
"""

from pathlib import Path

from nickel_conf.accessors.base import TypedAccessor
from nickel_conf.accessors.boolean import BooleanAccessor
from nickel_conf.accessors.integer import IntegerAccessor
from nickel_conf.config.settings import NickelConfSettings
from nickel_conf.dotconf.base import SectionKeyManager
from nickel_conf.dotconf.binding import KeyBinding
from nickel_conf.dotconf.manager import (
    DEFAULT_CONF_PATH,
    LinuxSectionKeyManager,
)
from nickel_conf.dotconf.patterns import (
    ANY_VALUE,
    INTEGER_VALUE,
    LOWERCASE_WORD_VALUE,
)
from nickel_conf.logging.base import Logger
from nickel_conf.validation import BooleanTypeValidator, IntegerRangeValidator

POWER_OPTIONS_SECTION = "PowerOptions"

# Nickel écrit FrontLightLevel entre 0 et 100
FRONT_LIGHT_LEVEL = KeyBinding(
    "FrontLightLevel", INTEGER_VALUE, POWER_OPTIONS_SECTION
)
# true (allumé) ou false (éteint) ; absent sur les liseuses sans bouton
FRONT_LIGHT_STATE = KeyBinding(
    "FrontLightState", ANY_VALUE, POWER_OPTIONS_SECTION,
    create_if_missing=False,
)
# Nickel écrit ColorSetting entre 1500 et 6400
COLOR_SETTING = KeyBinding(
    "ColorSetting", INTEGER_VALUE, POWER_OPTIONS_SECTION
)
# BedTime n'est pas géré (sérialisé en QVariant par Nickel)
AUTO_COLOR_ENABLED = KeyBinding(
    "AutoColorEnabled", LOWERCASE_WORD_VALUE, POWER_OPTIONS_SECTION
)

FRONT_LIGHT_LEVEL_RANGE = (0, 100)
COLOR_SETTING_RANGE = (1500, 6400)
FALLBACK_FRONT_LIGHT_LEVEL = 1


class NickelConf:
    """Accès typé aux réglages d'éclairage de ``Kobo eReader.conf``.

    Attributes:
        manager: Moteur partagé par les quatre accesseurs.
        front_light_level: Intensité 0-100 ; vaut 1 (et l'écrit) si
            la clé est absente.
        front_light_state: Éclairage allumé/éteint ; jamais créé.
        color_setting: Température de couleur 1500-6400.
        auto_color_enabled: Température automatique activée.

    Example:
        >>> from nickel_conf import FileLogger, NickelConf
        >>> conf = NickelConf(FileLogger("/tmp/nickel_conf.log"),
        ...                   "/tmp/eReader.conf")
        >>> conf.front_light_level.set(75)
        True
        >>> conf.front_light_level.get()
        75
    """

    def __init__(
        self,
        logger: Logger,
        conf_path: str | Path = DEFAULT_CONF_PATH,
        manager: SectionKeyManager | None = None,
    ) -> None:
        """Initialise les accesseurs.

        Args:
            logger: Instance de Logger transmise au moteur.
            conf_path: Chemin du fichier de configuration Nickel.
            manager: Moteur à utiliser à la place de
                LinuxSectionKeyManager (tests, autre support).
        """
        self.manager = manager or LinuxSectionKeyManager(logger, conf_path)

        self.front_light_level = IntegerAccessor(
            self.manager,
            FRONT_LIGHT_LEVEL,
            IntegerRangeValidator("FrontLightLevel", *FRONT_LIGHT_LEVEL_RANGE),
            default=FALLBACK_FRONT_LIGHT_LEVEL,
        )
        self.front_light_state = BooleanAccessor(
            self.manager,
            FRONT_LIGHT_STATE,
            BooleanTypeValidator("FrontLightState"),
        )
        self.color_setting = IntegerAccessor(
            self.manager,
            COLOR_SETTING,
            IntegerRangeValidator("ColorSetting", *COLOR_SETTING_RANGE),
        )
        self.auto_color_enabled = BooleanAccessor(
            self.manager,
            AUTO_COLOR_ENABLED,
            BooleanTypeValidator("AutoColorEnabled"),
        )

    @classmethod
    def from_settings(
        cls, settings: NickelConfSettings, logger: Logger
    ) -> "NickelConf":
        """Crée une instance depuis des réglages chargés.

        Args:
            settings: Réglages validés (chemin du fichier Nickel).
            logger: Instance de Logger.
        """
        return cls(logger, settings.conf_path)

    def accessors(self) -> dict[str, TypedAccessor]:
        """Retourne les accesseurs indexés par nom de clé du fichier."""
        return {
            accessor.key: accessor
            for accessor in (
                self.front_light_level,
                self.front_light_state,
                self.color_setting,
                self.auto_color_enabled,
            )
        }
