"""Interface abstraite du moteur clé/valeur limité à une section.

Ce module définit le contrat (ABC) SectionKeyManager : lecture et
réécriture d'une clé unique dans une section nommée d'un fichier
de configuration de type INI.
"""

from abc import ABC, abstractmethod

from nickel_conf.dotconf.binding import KeyBinding


class SectionKeyManager(ABC):
    """Interface pour l'accès à une clé à l'intérieur d'une section.

    Chaque appel relit le fichier : aucun état n'est conservé entre
    deux opérations.
    """

    @abstractmethod
    def get(self, binding: KeyBinding) -> str | None:
        """Lit la valeur d'une clé dans sa section.

        Args:
            binding: Clé, grammaire et section recherchées.

        Returns:
            La première valeur trouvée dans la section, ou None si la
            clé, la section ou le fichier est absent.
        """
        pass

    @abstractmethod
    def set(self, binding: KeyBinding, value: str) -> bool:
        """Écrit la valeur d'une clé en préservant le reste du fichier.

        Args:
            binding: Clé, grammaire et section à modifier.
            value: Valeur déjà formatée à écrire.

        Returns:
            True une fois l'opération terminée (y compris lorsqu'une
            clé absente n'a pas à être créée).

        Raises:
            OSError: Si le fichier ne peut pas être écrit.
        """
        pass
