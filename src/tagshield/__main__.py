"""Main entry point for the TagShield command-line interface."""

import argparse
import json
import logging
import sys
from collections.abc import Callable
from pathlib import Path

from . import __version__
from .config import TagShieldConfig, load_config
from .logging_utils import setup_logging
from .protection import protect, restore
from .restoration import restore_locally
from .store import EntryStoreError, load_entries, save_entries
from .translators import get_translator
from .types import ProtectedTag
from .workflow import run_entries

logger = logging.getLogger(__name__)


def _add_file_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("file", help="The JSON or YAML entry file to process.")
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Where to write the result (default: overwrite the input file).",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="Path to a YAML configuration file (default: built-in settings).",
    )


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments for the TagShield CLI.

    Returns:
        argparse.Namespace: An object containing the parsed command-line arguments.

    """
    parser = argparse.ArgumentParser(description="TagShield Tag Protection Tool")
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"TagShield {__version__}",
        help="Show the version number and exit.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug level logging.",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    protect_parser = subparsers.add_parser("protect", help="Replace the tags of a text with placeholders.")
    protect_parser.add_argument("text", help="The text to protect.")

    restore_parser = subparsers.add_parser("restore", help="Put protected tags back into a translated text.")
    restore_parser.add_argument("text", help="The translated text containing placeholders.")
    restore_parser.add_argument("--tags", required=True, help="The JSON tag list printed by 'protect'.")

    recover_parser = subparsers.add_parser("recover", help="Reinsert tags a translation lost, without placeholders.")
    recover_parser.add_argument("original", help="The source text.")
    recover_parser.add_argument("translation", help="The translated text.")

    repair_parser = subparsers.add_parser("repair", help="Repair the tags of every translation in an entry file.")
    _add_file_arguments(repair_parser)

    translate_parser = subparsers.add_parser("translate", help="Translate an entry file with tag protection.")
    _add_file_arguments(translate_parser)

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help(sys.stderr)
        sys.exit(1)
    return args


def _cmd_protect(args: argparse.Namespace) -> None:
    protected = protect(args.text)
    print(protected.clean_text)
    print(json.dumps([tag.to_dict() for tag in protected.tags], ensure_ascii=False))


def _cmd_restore(args: argparse.Namespace) -> None:
    try:
        tags = [ProtectedTag.from_dict(item) for item in json.loads(args.tags)]
    except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
        logger.error("Invalid --tags value: %s", e)  # noqa: TRY400
        sys.exit(1)
    print(restore(args.text, tags))


def _cmd_recover(args: argparse.Namespace) -> None:
    print(restore_locally(args.original, args.translation))


def _load_config(config_path: str | None) -> TagShieldConfig | None:
    """
    Load configuration from the given path, or the built-in defaults.

    Returns:
        An optional TagShieldConfig object if loading is successful, otherwise None.

    """
    if config_path is None:
        return TagShieldConfig()
    try:
        logger.info("Loading configuration from: %s", config_path)
        return load_config(config_path)
    except FileNotFoundError:
        logger.exception("Could not find a valid configuration file.")
        return None
    except Exception:
        logger.exception("An unexpected error occurred while loading the configuration.")
        return None


def _process_file(args: argparse.Namespace, *, repair_only: bool) -> None:
    config = _load_config(args.config)
    if config is None:
        logger.critical("Failed to load configuration. Aborting.")
        sys.exit(1)

    translator = None
    if not repair_only:
        translator = get_translator(config.translator)
        if translator is None:
            logger.critical("Unknown translator '%s'. Aborting.", config.translator)
            sys.exit(1)

    try:
        entries = load_entries(args.file)
        run_entries(entries, config, translator=translator, repair_only=repair_only, debug=args.debug)
        save_entries(Path(args.output or args.file), entries)
    except EntryStoreError as e:
        logger.critical("%s", e)
        sys.exit(1)


def _cmd_repair(args: argparse.Namespace) -> None:
    _process_file(args, repair_only=True)


def _cmd_translate(args: argparse.Namespace) -> None:
    _process_file(args, repair_only=False)


_COMMANDS: dict[str, Callable[[argparse.Namespace], None]] = {
    "protect": _cmd_protect,
    "restore": _cmd_restore,
    "recover": _cmd_recover,
    "repair": _cmd_repair,
    "translate": _cmd_translate,
}


def main(argv: list[str] | None = None) -> None:
    """
    Run the main entry point for the TagShield command-line interface.

    Parses the command-line arguments, configures logging and dispatches to
    the selected command. Unexpected errors are logged and exit with status 1.
    """
    try:
        args = _parse_args(argv)
        setup_logging(version=__version__, debug=args.debug)
        _COMMANDS[args.command](args)
    except Exception:
        logger.exception("An unexpected error occurred")
        logger.critical("An unrecoverable error occurred. Please check the logs for details.")
        sys.exit(1)


if __name__ == "__main__":
    main()
