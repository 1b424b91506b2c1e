"""Représentation d'un fichier en lignes réécrites plus un reliquat."""

from dataclasses import dataclass, field


@dataclass
class LineStore:
    """Fichier vu comme un préfixe de lignes suivi d'un reliquat brut.

    Le préfixe contient les lignes lues (ou insérées) jusqu'au point de
    modification, sans terminateur. Le reliquat est la fin du fichier
    recopiée telle quelle.

    Attributes:
        lines: Lignes du préfixe, dans l'ordre.
        remainder: Fin du fichier non analysée, ou None.
    """

    lines: list[str] = field(default_factory=list)
    remainder: str | None = None

    def append(self, line: str) -> None:
        self.lines.append(line)

    def render(self) -> str:
        """Produit le contenu complet à écrire.

        Chaque ligne du préfixe est terminée par ``\\n``, le reliquat
        est ajouté sans transformation.
        """
        content = "".join(f"{line}\n" for line in self.lines)
        if self.remainder:
            content += self.remainder
        return content
