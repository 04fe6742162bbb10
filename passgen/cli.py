"""CLI for passgen: generate random, pin or rule-based passwords and report their strength."""

import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from .config import load_config
from .errors import PasswordGeneratorError, UnsupportedPasswordType, check_length
from .generator import PLACEMENTS, Generator
from .models import MAX_LENGTH, MIN_LENGTH, GenerationRequest
from .strength import get_password_strength, strength_label

log = logging.getLogger(__name__)

console = Console(highlight=False, emoji=False)
err_console = Console(stderr=True, highlight=False, emoji=False)

BANNER = "Welcome to the password generator 5000"


def _length(value: str) -> int:
    try:
        return check_length(int(value))
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"length should be a number between {MIN_LENGTH} and {MAX_LENGTH}"
        )


def _copies(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        n = 0
    if n < 1:
        raise argparse.ArgumentTypeError("copies should be a positive number")
    return n


def build_request(args) -> tuple:
    """Map parsed flags to (title, strength title, GenerationRequest)."""
    if args.type == "random":
        return (
            "Generated fully random password",
            "Fully random password's strength",
            GenerationRequest.random(args.length),
        )
    if args.type == "pin":
        return "Generated pin", "Generated pin's strength", GenerationRequest.pin(args.length)
    if args.type == "memorable":
        raise UnsupportedPasswordType(args.type)
    # lowercase is always on outside of the fixed types
    request = GenerationRequest(
        args.length,
        with_symbols=args.symbols,
        with_digits=args.numbers,
        with_uppercase=args.capitalized,
        with_lowercase=True,
    )
    return "Generated password", "Password's strength", request


def cmd_generate(args, cfg):
    if args.length is None:
        args.length = check_length(cfg["default_length"])
    copies = args.copies or cfg.get("copies", 1)
    if isinstance(copies, bool) or not isinstance(copies, int) or copies < 1:
        log.warning("invalid copies %r in config, generating one password", copies)
        copies = 1
    title, strength_title, request = build_request(args)
    placement = cfg.get("placement", "front_back")
    if placement not in PLACEMENTS:
        log.warning("unknown placement %r in config, using front_back", placement)
        placement = "front_back"
    generator = Generator(placement=placement)

    for i in range(copies):
        pw = generator.generate(request)
        label = f"{title} #{i+1}" if copies > 1 else title
        # plain Text, so the password is never parsed as markup or emoji
        console.print(Text.assemble((f"{label}:", "bold green"), " ", pw), soft_wrap=True)

    pct = get_password_strength(
        request.length,
        request.with_symbols,
        request.with_digits,
        request.with_uppercase,
        request.with_lowercase,
    )
    err_console.print(f"{strength_title}: {pct:.0f}% ({strength_label(pct)})")


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="passgen")
    sub = parser.add_subparsers(dest="cmd", required=True)

    gen = sub.add_parser(
        "generate", aliases=["password-generate"], help="Generate one or more passwords"
    )
    gen.add_argument("--length", type=_length, default=None,
                     help=f"Password length ({MIN_LENGTH}-{MAX_LENGTH})")
    gen.add_argument("--numbers", action="store_true", help="Include digits")
    gen.add_argument("--symbols", action="store_true", help="Include symbols")
    gen.add_argument("--capitalized", action="store_true", help="Include uppercase letters")
    gen.add_argument("--type", choices=["random", "pin", "memorable"],
                     help="Use a fixed password type instead of the individual flags")
    gen.add_argument("--copies", type=_copies, default=None, help="How many passwords to generate")
    gen.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    gen.set_defaults(func=cmd_generate)
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    cfg = load_config()
    if args.verbose:
        logging.getLogger("passgen").setLevel(logging.DEBUG)
    else:
        level = logging.getLevelName(str(cfg.get("log_level", "WARNING")).upper())
        if isinstance(level, int):
            logging.getLogger("passgen").setLevel(level)
        else:
            log.warning("unknown log_level %r in config", cfg.get("log_level"))

    console.print(BANNER)
    try:
        args.func(args, cfg)
    except PasswordGeneratorError as e:
        log.debug("generation failed", exc_info=True)
        err_console.print(Text(f"Error: {e}", style="red"))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
