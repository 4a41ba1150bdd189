"""Base interfaces for transaction signing.

Signing flow:
1. Resolve the key owner and locate the key file
2. Parse the private key inside a signing context
3. Bind the key to a Signer
4. Hand the Signer to the transaction builder, which only ever sees signatures
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class PrivateKey(ABC):
    """Raw private key material for one algorithm."""

    @abstractmethod
    def get_algorithm_name(self) -> str:
        pass

    @abstractmethod
    def as_bytes(self) -> bytes:
        pass

    def as_hex(self) -> str:
        return self.as_bytes().hex()

    def __repr__(self) -> str:
        # Never render key material
        return f"{self.__class__.__name__}(algorithm={self.get_algorithm_name()})"


class PublicKey(ABC):
    """Public half of a key pair."""

    @abstractmethod
    def get_algorithm_name(self) -> str:
        pass

    @abstractmethod
    def as_bytes(self) -> bytes:
        pass

    def as_hex(self) -> str:
        return self.as_bytes().hex()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PublicKey):
            return NotImplemented
        return (
            self.get_algorithm_name() == other.get_algorithm_name()
            and self.as_bytes() == other.as_bytes()
        )

    def __hash__(self) -> int:
        return hash((self.get_algorithm_name(), self.as_bytes()))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.as_hex()})"


class Context(ABC):
    """Fixed algorithm parameters shared by every signer created through it.

    A context is built once by the caller and passed explicitly to whatever
    needs to parse keys or create signers.
    """

    @abstractmethod
    def get_algorithm_name(self) -> str:
        """Name of the signature scheme, e.g. ``secp256k1``."""
        pass

    @abstractmethod
    def sign(self, message: bytes, private_key: PrivateKey) -> str:
        """Sign a message.

        Args:
            message: Raw bytes to sign (hashed by the context)
            private_key: Key to sign with

        Returns:
            Signature as a hex string
        """
        pass

    @abstractmethod
    def verify(self, signature: str, message: bytes, public_key: PublicKey) -> bool:
        """Check a hex signature against a message and public key."""
        pass

    @abstractmethod
    def get_public_key(self, private_key: PrivateKey) -> PublicKey:
        pass

    @abstractmethod
    def private_key_from_hex(self, hex_str: str) -> PrivateKey:
        """Parse a hex-encoded private key.

        Raises:
            ParseError: If the string is not hex or not a valid key for the curve
        """
        pass

    @abstractmethod
    def public_key_from_hex(self, hex_str: str) -> PublicKey:
        pass

    def new_signer(self, private_key: PrivateKey) -> "Signer":
        """Bind a private key to this context."""
        return Signer(self, private_key)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(algorithm={self.get_algorithm_name()})"


class Signer:
    """Signing capability: a private key bound to a context.

    The key never leaves the signer; callers only receive signatures
    and the public key.
    """

    def __init__(self, context: Context, private_key: PrivateKey):
        self._context = context
        self._private_key = private_key
        self._public_key: Optional[PublicKey] = None

    @property
    def context(self) -> Context:
        return self._context

    def sign(self, message: bytes) -> str:
        """Sign a message with the bound key.

        Returns:
            Signature as a hex string
        """
        return self._context.sign(message, self._private_key)

    def get_public_key(self) -> PublicKey:
        if self._public_key is None:
            self._public_key = self._context.get_public_key(self._private_key)
        return self._public_key

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(algorithm={self._context.get_algorithm_name()})"


class SigningError(Exception):
    """Exception raised when signing fails."""
    pass


class ParseError(SigningError):
    """Exception raised when key or signature material cannot be decoded."""
    pass


class KeyLoadError(SigningError):
    """Exception raised when a signing key cannot be loaded from disk."""
    pass


class IdentityUnresolvedError(KeyLoadError):
    """No key name was given and no username could be determined."""

    def __init__(self):
        super().__init__("Could not load signing key: unable to determine username")


class HomeDirectoryUnresolvedError(KeyLoadError):
    """The home directory holding the key store could not be determined."""

    def __init__(self):
        super().__init__("Could not load signing key: unable to determine home directory")


class KeyFileNotFoundError(KeyLoadError):
    """Exception raised when the key file does not exist."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"No such key file: {path}")


class EmptyKeyFileError(KeyLoadError):
    """Exception raised when the key file has no key on its first line."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Empty key file: {path}")


class KeyFileReadError(KeyLoadError):
    """Exception raised when the key file exists but cannot be read."""

    def __init__(self, path: Path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Unable to read key file {path}: {cause}")


class KeyParseError(KeyLoadError):
    """Exception raised when the key file does not hold a valid private key."""

    def __init__(self, path: Path, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Unable to parse private key file {path}: {cause}")
