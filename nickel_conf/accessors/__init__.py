"""Module d'accesseurs typés pour les réglages Nickel."""

from nickel_conf.accessors.base import TypedAccessor
from nickel_conf.accessors.boolean import BooleanAccessor
from nickel_conf.accessors.integer import IntegerAccessor
from nickel_conf.accessors.power_options import (
    AUTO_COLOR_ENABLED,
    COLOR_SETTING,
    FRONT_LIGHT_LEVEL,
    FRONT_LIGHT_STATE,
    POWER_OPTIONS_SECTION,
    NickelConf,
)

__all__ = [
    "TypedAccessor",
    "IntegerAccessor",
    "BooleanAccessor",
    "NickelConf",
    "POWER_OPTIONS_SECTION",
    "FRONT_LIGHT_LEVEL",
    "FRONT_LIGHT_STATE",
    "COLOR_SETTING",
    "AUTO_COLOR_ENABLED",
]
