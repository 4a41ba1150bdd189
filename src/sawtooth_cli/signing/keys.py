"""Signing key loader.

Keys live one per file under the user's home directory:

    $HOME/.sawtooth/keys/<name>.priv

The first line of the file holds the hex-encoded private key. Anything after
it is ignored. If no key name is given, the ``USER`` environment variable is
used, then the operating system's current username.
"""

import logging
from pathlib import Path
from typing import Optional

from sawtooth_cli.signing.base import (
    Context,
    EmptyKeyFileError,
    HomeDirectoryUnresolvedError,
    IdentityUnresolvedError,
    KeyFileNotFoundError,
    KeyFileReadError,
    KeyParseError,
    ParseError,
    PrivateKey,
    Signer,
)
from sawtooth_cli.signing.identity import IdentityProvider, ProcessIdentityProvider
from sawtooth_cli.signing.secp256k1 import Secp256k1Context

logger = logging.getLogger(__name__)

KEY_DIR = Path(".sawtooth") / "keys"
KEY_SUFFIX = ".priv"


class KeyLoader:
    """Resolves, reads and parses signing keys.

    Args:
        context: Signing context keys are parsed and bound with.
            Defaults to a new secp256k1 context.
        identity: Source of username and home directory.
            Defaults to the running process.
    """

    def __init__(
        self,
        context: Optional[Context] = None,
        identity: Optional[IdentityProvider] = None,
    ):
        self.context = context if context is not None else Secp256k1Context()
        self.identity = identity if identity is not None else ProcessIdentityProvider()

    def resolve_identity(self, name: Optional[str] = None) -> str:
        """Determine whose key to load.

        Priority:
        1. Explicit name
        2. USER environment variable
        3. Operating system username

        Raises:
            IdentityUnresolvedError: If none of the sources yields a name
        """
        if name is not None:
            return name

        username = self.identity.env_username()
        if username:
            logger.debug("Key name taken from USER")
            return username

        username = self.identity.os_username()
        if username:
            logger.debug("Key name taken from the OS user database")
            return username

        raise IdentityUnresolvedError()

    def build_key_path(self, identity: str) -> Path:
        """Path of the private key file for ``identity``.

        Raises:
            HomeDirectoryUnresolvedError: If the home directory is unknown
        """
        home = self.identity.home_dir()
        if home is None:
            raise HomeDirectoryUnresolvedError()
        return home / KEY_DIR / f"{identity}{KEY_SUFFIX}"

    def load_private_key(self, path: Path) -> PrivateKey:
        """Read and parse the key on the first line of ``path``.

        Raises:
            KeyFileNotFoundError: If the file does not exist
            KeyFileReadError: If the file cannot be read
            EmptyKeyFileError: If the file has no key on its first line
            KeyParseError: If the first line is not a valid private key
        """
        path = Path(path)
        if not path.exists():
            raise KeyFileNotFoundError(path)

        logger.debug(f"Loading signing key from {path}")
        try:
            with open(path, "rb") as f:
                first_line = f.readline()
        except FileNotFoundError as e:
            raise KeyFileNotFoundError(path) from e
        except OSError as e:
            raise KeyFileReadError(path, e) from e

        # Only the first line is decoded; later lines may hold anything
        try:
            key_str = first_line.decode("utf-8").strip()
        except UnicodeDecodeError as e:
            raise KeyParseError(path, e) from e

        if not key_str:
            raise EmptyKeyFileError(path)

        try:
            return self.context.private_key_from_hex(key_str)
        except ParseError as e:
            raise KeyParseError(path, e) from e

    def load_signing_key(self, name: Optional[str] = None) -> PrivateKey:
        """Resolve the key file for ``name`` and load its private key."""
        identity = self.resolve_identity(name)
        path = self.build_key_path(identity)
        return self.load_private_key(path)

    def new_signer(self, name: Optional[str] = None) -> Signer:
        """Load the signing key for ``name`` and bind it to the context."""
        private_key = self.load_signing_key(name)
        return self.context.new_signer(private_key)


def new_signer(
    key_name: Optional[str] = None,
    *,
    context: Optional[Context] = None,
    identity: Optional[IdentityProvider] = None,
) -> Signer:
    """Return a Signer, loading the signing key from the user's environment.

    Args:
        key_name: Name of the key; defaults to the current username
        context: Signing context to bind the key to (secp256k1 if omitted)
        identity: Identity provider (the running process if omitted)

    Raises:
        KeyLoadError: If the key cannot be resolved, read or parsed
    """
    return KeyLoader(context=context, identity=identity).new_signer(key_name)
