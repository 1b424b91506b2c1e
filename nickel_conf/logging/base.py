"""Interface abstraite pour le logging de nickel_conf.

Le moteur dotconf et la CLI ne connaissent que cette interface :
FileLogger l'implémente sur un fichier, les tests peuvent la remplacer
par un MagicMock(spec=Logger).
"""

from abc import ABC, abstractmethod


class Logger(ABC):
    """Interface de logging injectée dans LinuxSectionKeyManager.

    Niveaux utilisés par le moteur :
    - debug : valeur lue, ou clé absente de ``Kobo eReader.conf``
    - info : clé mise à jour ou ajoutée, section créée, fichier absent
    - warning : fichier illisible lors d'une lecture
    - error : erreur remontée par LoggerErrorHandler
    """

    @abstractmethod
    def log_debug(self, message: str) -> None:
        """Trace une lecture de clé."""
        pass

    @abstractmethod
    def log_info(self, message: str) -> None:
        """Trace une écriture dans le fichier de configuration."""
        pass

    @abstractmethod
    def log_warning(self, message: str) -> None:
        """Trace un fichier illisible, traité comme clé absente."""
        pass

    @abstractmethod
    def log_error(self, message: str) -> None:
        """Trace une erreur ayant interrompu une commande."""
        pass
