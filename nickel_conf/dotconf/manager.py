"""Moteur de lecture/réécriture d'une clé dans un fichier INI Nickel.

Ce module fournit LinuxSectionKeyManager, qui parcourt le fichier ligne
par ligne sans l'interpréter entièrement : seules la section cible et
la ligne de la clé sont touchées, tout le reste est recopié à l'octet
près.

Le fichier est écrit par Nickel et peut contenir des octets qui ne sont
pas de l'UTF-8 valide : ils sont décodés avec ``surrogateescape`` et
réécrits à l'identique.
"""

from collections.abc import Iterator
from pathlib import Path

from nickel_conf.dotconf.base import SectionKeyManager
from nickel_conf.dotconf.binding import KeyBinding
from nickel_conf.dotconf.line_store import LineStore
from nickel_conf.dotconf.scanner import SectionScanner
from nickel_conf.logging.base import Logger

DEFAULT_CONF_PATH = Path("/mnt/onboard/.kobo/Kobo/Kobo eReader.conf")

ENCODING = "utf-8"
ENCODING_ERRORS = "surrogateescape"


def split_lines(content: str) -> Iterator[tuple[str, int]]:
    """Découpe un contenu sur ``\\n`` uniquement.

    Un ``\\r`` final est retiré de la ligne retournée ; un ``\\r`` isolé
    au milieu d'une ligne est conservé.

    Args:
        content: Contenu complet du fichier.

    Yields:
        La ligne sans terminateur et la position qui suit son ``\\n``.
    """
    start = 0
    while start < len(content):
        end = content.find("\n", start)
        next_start = len(content) if end == -1 else end + 1
        line = content[start:next_start].removesuffix("\n")
        yield line.removesuffix("\r"), next_start
        start = next_start


class LinuxSectionKeyManager(SectionKeyManager):
    """Gestionnaire de clés limité à une section, sur fichier local.

    Attributes:
        logger: Instance de Logger pour tracer les opérations.
        conf_path: Chemin du fichier de configuration.

    Example:
        >>> from nickel_conf import FileLogger
        >>> logger = FileLogger("/tmp/nickel_conf.log")
        >>> manager = LinuxSectionKeyManager(logger, "/tmp/eReader.conf")
        >>> binding = KeyBinding("ColorSetting", "[0-9]+", "PowerOptions")
        >>> manager.set(binding, "3000")
        True
        >>> manager.get(binding)
        '3000'
    """

    def __init__(
        self,
        logger: Logger,
        conf_path: str | Path = DEFAULT_CONF_PATH,
    ) -> None:
        """Initialise le gestionnaire.

        Args:
            logger: Instance de Logger pour les messages.
            conf_path: Chemin du fichier à lire et réécrire.
        """
        self.logger = logger
        self.conf_path = Path(conf_path)

    def get(self, binding: KeyBinding) -> str | None:
        """Lit la première valeur de la clé dans sa section.

        Un fichier illisible est traité comme une clé absente.
        """
        try:
            content = self._read()
        except OSError as e:
            self.logger.log_warning(
                f"Lecture impossible de {self.conf_path} : {e}"
            )
            return None

        scanner = SectionScanner(binding.section_pattern)
        for line, _ in split_lines(content):
            if scanner.feed(line) or not scanner.inside:
                continue
            value = binding.match(line)
            if value is not None:
                self.logger.log_debug(
                    f"[{binding.section}] {binding.key} = {value}"
                )
                return value

        self.logger.log_debug(
            f"[{binding.section}] {binding.key} absent de {self.conf_path}"
        )
        return None

    def set(self, binding: KeyBinding, value: str) -> bool:
        """Remplace ou insère ``key=value`` dans la section cible.

        - Clé trouvée dans la section : la ligne est remplacée.
        - Section terminée sans la clé : la clé est insérée juste
          avant l'en-tête suivant.
        - Clé absente et ``create_if_missing`` faux : rien n'est écrit.
        - Section absente : elle est ajoutée en fin de fichier.
        """
        new_line = binding.format_line(value)
        store, found, section_seen = self._load(binding, new_line)

        if not found:
            if not binding.create_if_missing:
                self.logger.log_info(
                    f"[{binding.section}] {binding.key} absent, "
                    "aucune création demandée."
                )
                return True
            if not section_seen:
                store.append(binding.header_line())
                self.logger.log_info(
                    f"Section [{binding.section}] ajoutée à "
                    f"{self.conf_path}."
                )
            store.append(new_line)

        with open(self.conf_path, "w", encoding=ENCODING,
                  errors=ENCODING_ERRORS, newline="") as conf:
            conf.write(store.render())

        action = "mis à jour" if found else "ajouté"
        self.logger.log_info(
            f"[{binding.section}] {new_line} {action} dans {self.conf_path}."
        )
        return True

    def _read(self) -> str:
        """Lit le fichier sans traduction des fins de ligne."""
        with open(self.conf_path, "r", encoding=ENCODING,
                  errors=ENCODING_ERRORS, newline="") as conf:
            return conf.read()

    def _load(
        self, binding: KeyBinding, new_line: str
    ) -> tuple[LineStore, bool, bool]:
        """Construit le contenu à réécrire.

        Args:
            binding: Clé recherchée.
            new_line: Ligne de remplacement.

        Returns:
            Le LineStore, un indicateur de clé trouvée et un indicateur
            de section cible rencontrée.
        """
        try:
            content = self._read()
        except FileNotFoundError:
            self.logger.log_info(
                f"{self.conf_path} absent, traité comme un fichier vide."
            )
            return LineStore(), False, False

        return self._scan(content, binding, new_line)

    @staticmethod
    def _scan(
        content: str, binding: KeyBinding, new_line: str
    ) -> tuple[LineStore, bool, bool]:
        store = LineStore()
        scanner = SectionScanner(binding.section_pattern)
        found = False
        checkpoint = 0

        for line, next_start in split_lines(content):
            if scanner.closes_target(line):
                # Fin de section sans la clé : on insère avant l'en-tête
                break
            scanner.feed(line)
            checkpoint = next_start
            if scanner.inside and binding.match(line) is not None:
                store.append(new_line)
                found = True
                break
            store.append(line)

        store.remainder = content[checkpoint:]
        return store, found, scanner.entered
