"""
Nickel Conf - Accès section par section à ``Kobo eReader.conf``.

Modules disponibles:
- dotconf: Moteur de lecture/réécriture d'une clé dans une section INI
  (KeyBinding, SectionScanner, LineStore, LinuxSectionKeyManager)
- accessors: Accesseurs typés des réglages [PowerOptions] (NickelConf)
- validation: Contrôles appliqués avant écriture (IntegerRangeValidator,
  BooleanTypeValidator)
- config: Chargement des réglages (TOML, JSON, Pydantic)
- logging: Gestion des logs (Logger, FileLogger)
- errors: Exceptions et handlers d'erreurs
"""

__version__ = "1.0.0"

from nickel_conf.logging import Logger, FileLogger
from nickel_conf.errors import (
    ApplicationError,
    ConfigurationError,
    FileConfigurationError,
    ValidationError,
    ErrorHandler,
    ErrorHandlerChain,
    ConsoleErrorHandler,
    LoggerErrorHandler,
)
from nickel_conf.config import (
    ConfigLoader,
    FileConfigLoader,
    NickelConfSettings,
    load_settings,
)
from nickel_conf.validation import (
    Validator,
    IntegerRangeValidator,
    BooleanTypeValidator,
)
from nickel_conf.dotconf import (
    DEFAULT_CONF_PATH,
    KeyBinding,
    LineStore,
    LinuxSectionKeyManager,
    ScanState,
    SectionKeyManager,
    SectionScanner,
)
from nickel_conf.accessors import (
    TypedAccessor,
    IntegerAccessor,
    BooleanAccessor,
    NickelConf,
)

__all__ = [
    # Logging
    "Logger",
    "FileLogger",
    # Errors
    "ApplicationError",
    "ConfigurationError",
    "FileConfigurationError",
    "ValidationError",
    "ErrorHandler",
    "ErrorHandlerChain",
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
    # Config
    "ConfigLoader",
    "FileConfigLoader",
    "NickelConfSettings",
    "load_settings",
    # Validation
    "Validator",
    "IntegerRangeValidator",
    "BooleanTypeValidator",
    # DotConf - Interface abstraite
    "SectionKeyManager",
    # DotConf - Implémentation
    "LinuxSectionKeyManager",
    "DEFAULT_CONF_PATH",
    # DotConf - Structures
    "KeyBinding",
    "LineStore",
    "ScanState",
    "SectionScanner",
    # Accessors
    "TypedAccessor",
    "IntegerAccessor",
    "BooleanAccessor",
    "NickelConf",
]
