"""Send environment variables (or any text) to 1Password and share them.

    cat .env | share-1password --emails alice@example.com
"""
import logging
import sys
from argparse import ArgumentParser
from typing import List, Optional

from share1password import __version__
from share1password.config import DEFAULT_EXPIRES_IN, DEFAULT_VAULT, Config
from share1password.op import OnePassword
from share1password.pipeline import run


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="share-1password", description=__doc__)
    parser.add_argument(
        "-v",
        "--vault",
        default=DEFAULT_VAULT,
        help="The 1Password vault to store the item in.",
    )
    parser.add_argument(
        "--expires-in",
        default=DEFAULT_EXPIRES_IN,
        help="Expiration time for the share link, passed as is to `op`.",
    )
    parser.add_argument(
        "--emails",
        nargs="+",
        action="extend",
        metavar="EMAIL",
        help="Email addresses to share the item with.",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose logging.")
    parser.add_argument(
        "-V", "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    config = Config.from_args(args)
    return run(config, OnePassword(config.op_binary))


if __name__ == "__main__":
    sys.exit(main())
