"""
Module contenant les exceptions personnalisées pour nickel_conf.

Ce module suit le principe SRP en isolant la gestion des exceptions.
"""


class ApplicationError(Exception):
    """Exception de base pour toute la bibliothèque."""
    pass


class ConfigurationError(ApplicationError):
    """Exception de base pour les réglages de l'application."""
    pass


class FileConfigurationError(ConfigurationError):
    """Fichier de réglages absent ou dans un format non supporté."""
    pass


class ValidationError(ApplicationError, ValueError):
    """Valeur refusée par un setter avant toute écriture."""
    pass
