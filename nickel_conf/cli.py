"""Interface en ligne de commande ``nickel-conf``.

Exemples:
    nickel-conf get front-light-level
    nickel-conf --conf-path ./eReader.conf set color-setting 3000
    nickel-conf --config réglages.toml set auto-color-enabled true
"""

import argparse
import sys
from pathlib import Path
from typing import Any, Optional, Sequence

from nickel_conf.accessors.base import TypedAccessor
from nickel_conf.accessors.boolean import (
    FALSE_LITERAL,
    TRUE_LITERAL,
    BooleanAccessor,
)
from nickel_conf.accessors.power_options import NickelConf
from nickel_conf.config.loader import load_settings
from nickel_conf.errors import (
    ConsoleErrorHandler,
    ErrorHandlerChain,
    LoggerErrorHandler,
    ValidationError,
)
from nickel_conf.logging.file_logger import FileLogger

# Nom en ligne de commande -> nom de clé dans le fichier
CLI_KEYS = {
    "front-light-level": "FrontLightLevel",
    "front-light-state": "FrontLightState",
    "color-setting": "ColorSetting",
    "auto-color-enabled": "AutoColorEnabled",
}

ABSENT = "absent"


def build_parser() -> argparse.ArgumentParser:
    """Construit l'analyseur d'arguments."""
    parser = argparse.ArgumentParser(
        prog="nickel-conf",
        description="Lit ou modifie les réglages [PowerOptions] "
                    "de Kobo eReader.conf",
    )
    parser.add_argument(
        "--config", help="Fichier de réglages TOML ou JSON"
    )
    parser.add_argument(
        "--conf-path", help="Chemin du fichier Kobo eReader.conf"
    )
    parser.add_argument("--log-file", help="Fichier de log")

    commands = parser.add_subparsers(dest="command", required=True)

    get_cmd = commands.add_parser("get", help="Affiche une valeur")
    get_cmd.add_argument("key", choices=sorted(CLI_KEYS))

    set_cmd = commands.add_parser("set", help="Écrit une valeur")
    set_cmd.add_argument("key", choices=sorted(CLI_KEYS))
    set_cmd.add_argument("value")

    return parser


def parse_value(accessor: TypedAccessor, text: str) -> Any:
    """Convertit l'argument texte dans le type de l'accesseur.

    Raises:
        ValidationError: Si le texte ne peut pas être converti.
    """
    if isinstance(accessor, BooleanAccessor):
        if text == TRUE_LITERAL:
            return True
        if text == FALSE_LITERAL:
            return False
        raise ValidationError(
            f"Mauvaise valeur pour {accessor.key} : "
            f"'{TRUE_LITERAL}' ou '{FALSE_LITERAL}' attendu, reçu {text!r}"
        )
    try:
        return int(text)
    except ValueError as e:
        raise ValidationError(
            f"Mauvaise valeur pour {accessor.key} : entier attendu, "
            f"reçu {text!r}"
        ) from e


def format_value(value: Any) -> str:
    """Formate une valeur lue pour l'affichage."""
    if value is None:
        return ABSENT
    if isinstance(value, bool):
        return TRUE_LITERAL if value else FALSE_LITERAL
    return str(value)


def run(args: argparse.Namespace, conf: NickelConf) -> str:
    """Exécute la commande demandée et retourne le texte à afficher."""
    accessor = conf.accessors()[CLI_KEYS[args.key]]
    if args.command == "get":
        return format_value(accessor.get())
    accessor.set(parse_value(accessor, args.value))
    return format_value(accessor.get())


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Point d'entrée de ``nickel-conf``.

    Returns:
        Code de sortie (0 en cas de succès).
    """
    args = build_parser().parse_args(argv)
    errors = ErrorHandlerChain().add_handler(ConsoleErrorHandler())

    try:
        settings = load_settings(args.config)
        if args.conf_path:
            settings = settings.model_copy(
                update={"conf_path": Path(args.conf_path)}
            )
        if args.log_file:
            settings = settings.model_copy(
                update={"log_file": args.log_file}
            )
        logger = FileLogger(
            settings.log_file,
            settings.logging_config(),
            console_output=settings.console_output,
        )
    except Exception as e:
        errors.handle_and_exit(e)

    errors.add_handler(LoggerErrorHandler(logger))

    try:
        print(run(args, NickelConf.from_settings(settings, logger)))
    except Exception as e:
        errors.handle_and_exit(e)
    return 0


if __name__ == "__main__":
    sys.exit(main())
