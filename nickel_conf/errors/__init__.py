"""Module de gestion des erreurs."""

from nickel_conf.errors.base import ErrorHandler, ErrorHandlerChain
from nickel_conf.errors.console_handler import ConsoleErrorHandler
from nickel_conf.errors.exceptions import (ApplicationError,
                                           ConfigurationError,
                                           FileConfigurationError,
                                           ValidationError)
from nickel_conf.errors.logger_handler import LoggerErrorHandler

__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "FileConfigurationError",
    "ValidationError",
    "ErrorHandler",
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
    "ErrorHandlerChain",
]
