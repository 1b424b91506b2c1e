"""
    ConsoleErrorHandler
"""
from nickel_conf.errors.base import ErrorHandler
from nickel_conf.errors.exceptions import (ApplicationError,
                                           ConfigurationError,
                                           ValidationError)


class ConsoleErrorHandler(ErrorHandler):
    """Handler pour afficher les erreurs dans la console.

    Distingue les erreurs connues (ApplicationError) des erreurs
    inattendues, et affiche un message de solution adapté au type
    d'erreur.
    """

    def handle(self, error: Exception) -> None:
        """Affiche l'erreur dans la console avec des messages utilisateur.

        Args:
            error: L'exception à afficher.
        """
        if isinstance(error, ApplicationError):
            self._handle_known_error(error)
        elif isinstance(error, PermissionError):
            print(f"\n🛑 {type(error).__name__}: {error}")
            print("\n🔧 Solution : Vérifiez les droits d'écriture "
                  "sur le fichier de configuration Nickel.")
        else:
            self._handle_unknown_error(error)

    def _handle_known_error(self, error: ApplicationError) -> None:
        """Gère les erreurs connues de la bibliothèque.

        Args:
            error: L'exception métier à traiter.
        """
        print(f"\n🛑 {type(error).__name__}: {error}")

        if isinstance(error, ValidationError):
            print("\n🔧 Solution : Corrigez la valeur demandée.")
        elif isinstance(error, ConfigurationError):
            print("\n🔧 Solution : Vérifiez votre fichier de réglages.")
        else:
            print("\n🔧 Solution : Consultez les logs pour plus de détails.")

    def _handle_unknown_error(self, error: Exception) -> None:
        """Gère les erreurs inattendues.

        Args:
            error: L'exception non prévue à afficher.
        """
        print(f"\n💥 Erreur inattendue: {error}")
        print(f"Type: {type(error).__name__}")
        print(
            "\n📋 Cela peut être un bug. "
            "Veuillez ouvrir une issue avec ces informations."
        )
