"""Interfaces abstraites pour la gestion des erreurs de nickel_conf.

La commande ``nickel-conf`` construit une ErrorHandlerChain avec
ConsoleErrorHandler, puis LoggerErrorHandler dès que le FileLogger
existe : une ValidationError (valeur hors plage) ou une OSError
d'écriture sur ``Kobo eReader.conf`` est affichée, journalisée, puis
le processus se termine avec le code 1.
"""

import sys
from abc import ABC, abstractmethod


class ErrorHandler(ABC):
    """Interface de base pour les handlers d'erreurs.

    ConsoleErrorHandler affiche l'erreur et une piste de solution,
    LoggerErrorHandler la consigne dans le journal de nickel_conf.
    """

    @abstractmethod
    def handle(self, error: Exception) -> None:
        """Traite une erreur.

        Args:
            error: L'exception à traiter.
        """
        pass


class ErrorHandlerChain:
    """Diffuse les erreurs à tous les handlers enregistrés.

    Chaque erreur est transmise à tous les handlers dans l'ordre
    d'ajout. La CLI n'ajoute le handler de log qu'après avoir créé le
    FileLogger, une erreur de chargement des réglages n'est donc
    qu'affichée.

    Example:
        >>> chain = ErrorHandlerChain().add_handler(ConsoleErrorHandler())
        >>> chain = chain.add_handler(LoggerErrorHandler(logger))
        >>> chain.handle_and_exit(ValidationError("ColorSetting hors plage"))
    """

    def __init__(self) -> None:
        """Initialise la chaîne avec une liste vide de handlers."""
        self.handlers: list[ErrorHandler] = []

    def add_handler(self, handler: ErrorHandler) -> "ErrorHandlerChain":
        """Ajoute un handler à la chaîne.

        Args:
            handler: Le handler d'erreurs à ajouter.

        Returns:
            La chaîne elle-même, pour enchaîner les ajouts.
        """
        self.handlers.append(handler)
        return self

    def handle(self, error: Exception) -> None:
        """Fait passer l'erreur à travers tous les handlers.

        Args:
            error: L'exception à diffuser.
        """
        for handler in self.handlers:
            handler.handle(error)

    def handle_and_exit(self, error: Exception, exit_code: int = 1) -> None:
        """Gère l'erreur et termine le programme.

        Args:
            error: L'exception à traiter avant la sortie.
            exit_code: Code de sortie du programme (défaut: 1).
        """
        self.handle(error)
        sys.exit(exit_code)
