"""Command-line entry point for the signing key loader.

Usage:
    sawtooth-keys public-key
    sawtooth-keys --key alice sign "hello"
    echo -n payload | sawtooth-keys sign -
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from pydantic import ValidationError

from sawtooth_cli.config import get_settings
from sawtooth_cli.signing import KeyLoader, Secp256k1Context, SigningError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sawtooth-keys",
        description="Load a signing key from ~/.sawtooth/keys and use it",
    )
    parser.add_argument("-k", "--key", type=str,
                        help="Name of the signing key (defaults to the current user)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("public-key", help="Print the public key for the signing key")

    sign_parser = subparsers.add_parser("sign", help="Sign a message and print the signature")
    sign_parser.add_argument("message", help="Message to sign, or '-' to read bytes from stdin")

    return parser


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _read_message(message: str) -> bytes:
    if message == "-":
        return sys.stdin.buffer.read()
    return message.encode("utf-8")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1

    configure_logging(args.verbose or settings.debug)

    key_name = args.key if args.key is not None else settings.key_name
    loader = KeyLoader(context=Secp256k1Context())

    try:
        signer = loader.new_signer(key_name)
    except SigningError as e:
        logger.debug(f"Key load failed: {e!r}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.command == "public-key":
        print(signer.get_public_key().as_hex())
    elif args.command == "sign":
        print(signer.sign(_read_message(args.message)))

    return 0


if __name__ == "__main__":
    sys.exit(main())
