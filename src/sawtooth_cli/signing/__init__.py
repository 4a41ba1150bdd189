"""Transaction signing services.

Provides:
- Secp256k1Context: the signing context used by the CLI
- KeyLoader: loads private keys from $HOME/.sawtooth/keys
- new_signer: one-call helper returning a ready Signer
"""

from sawtooth_cli.signing.base import (
    Context,
    EmptyKeyFileError,
    HomeDirectoryUnresolvedError,
    IdentityUnresolvedError,
    KeyFileNotFoundError,
    KeyFileReadError,
    KeyLoadError,
    KeyParseError,
    ParseError,
    PrivateKey,
    PublicKey,
    Signer,
    SigningError,
)
from sawtooth_cli.signing.identity import (
    IdentityProvider,
    ProcessIdentityProvider,
    StaticIdentityProvider,
)
from sawtooth_cli.signing.keys import KeyLoader, new_signer
from sawtooth_cli.signing.secp256k1 import (
    Secp256k1Context,
    Secp256k1PrivateKey,
    Secp256k1PublicKey,
)

__all__ = [
    "Context",
    "PrivateKey",
    "PublicKey",
    "Signer",
    "SigningError",
    "ParseError",
    "KeyLoadError",
    "IdentityUnresolvedError",
    "HomeDirectoryUnresolvedError",
    "KeyFileNotFoundError",
    "KeyFileReadError",
    "EmptyKeyFileError",
    "KeyParseError",
    "IdentityProvider",
    "ProcessIdentityProvider",
    "StaticIdentityProvider",
    "KeyLoader",
    "new_signer",
    "Secp256k1Context",
    "Secp256k1PrivateKey",
    "Secp256k1PublicKey",
]
