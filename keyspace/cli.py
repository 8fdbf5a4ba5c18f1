"""CLI for keyspace: prompt for a password and report how large its search space is."""

import argparse
import logging
import sys

from rich.console import Console

from .config import Settings, load_config
from .estimator import analyze
from .prompt import EndOfInput, TooManyAttempts, prompt_password
from .report import make_console, print_report

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="keyspace",
        description="Estimate password strength from the character sets it uses",
    )
    parser.add_argument("--hide", action="store_true", help="Do not echo the password while typing")
    parser.add_argument("--config", "-c", type=str, help="Path to a JSON settings file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose (debug) logging")
    return parser


def run(settings: Settings, stdin, console: Console) -> int:
    errors = Console(stderr=True, highlight=False)
    try:
        password = prompt_password(
            stdin,
            console,
            show=settings.show_password,
            max_attempts=settings.max_attempts,
            encoding=settings.encoding,
        )
    except EndOfInput:
        console.print()
        errors.print("[red]No password entered.[/red]")
        return 0
    except TooManyAttempts as e:
        errors.print(f"[red]Giving up: {e}.[/red]")
        return 0

    result = analyze(password)
    log.debug("alphabet of %d symbols, %d bits", result.alphabet_size, result.bits)
    print_report(result, console)
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )
    settings = load_config(args.config)
    if args.hide:
        settings.show_password = False
    return run(settings, sys.stdin.buffer, make_console())


if __name__ == "__main__":
    sys.exit(main())
