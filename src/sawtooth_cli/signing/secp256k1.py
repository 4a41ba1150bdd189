"""secp256k1 signing context.

Messages are hashed with SHA-256 and signed deterministically (RFC 6979).
Signatures are the 64-byte compact ``r || s`` encoding with ``s`` normalized
to the lower half of the curve order, hex encoded.
"""

import hashlib
import logging
import re

from ecdsa import SECP256k1, BadSignatureError, SigningKey, VerifyingKey
from ecdsa.errors import MalformedPointError
from ecdsa.util import MalformedSignature, sigdecode_string, sigencode_string_canonize

from sawtooth_cli.signing.base import Context, ParseError, PrivateKey, PublicKey

logger = logging.getLogger(__name__)

ALGORITHM_NAME = "secp256k1"
PRIVATE_KEY_SIZE = 32

_HEX_RE = re.compile(r"[0-9a-fA-F]*")


def _decode_hex(hex_str: str) -> bytes:
    hex_str = hex_str.strip()
    if not _HEX_RE.fullmatch(hex_str):
        raise ParseError("Invalid hex: expected only hexadecimal digits")
    try:
        return bytes.fromhex(hex_str)
    except ValueError as e:
        raise ParseError(f"Invalid hex: {e}") from e


class Secp256k1PrivateKey(PrivateKey):
    """secp256k1 private key (32-byte big-endian scalar)."""

    def __init__(self, signing_key: SigningKey):
        self._signing_key = signing_key

    @classmethod
    def from_bytes(cls, data: bytes) -> "Secp256k1PrivateKey":
        if len(data) != PRIVATE_KEY_SIZE:
            raise ParseError(
                f"Invalid private key length: expected {PRIVATE_KEY_SIZE} bytes, got {len(data)}"
            )
        try:
            return cls(SigningKey.from_string(data, curve=SECP256k1, hashfunc=hashlib.sha256))
        except MalformedPointError as e:
            raise ParseError(f"Invalid secp256k1 private key: {e}") from e

    @classmethod
    def from_hex(cls, hex_str: str) -> "Secp256k1PrivateKey":
        return cls.from_bytes(_decode_hex(hex_str))

    @property
    def signing_key(self) -> SigningKey:
        return self._signing_key

    def get_algorithm_name(self) -> str:
        return ALGORITHM_NAME

    def as_bytes(self) -> bytes:
        return self._signing_key.to_string()


class Secp256k1PublicKey(PublicKey):
    """secp256k1 public key, serialized in compressed SEC1 form."""

    def __init__(self, verifying_key: VerifyingKey):
        self._verifying_key = verifying_key

    @classmethod
    def from_bytes(cls, data: bytes) -> "Secp256k1PublicKey":
        """Parse a compressed, uncompressed or raw public key."""
        try:
            return cls(VerifyingKey.from_string(data, curve=SECP256k1, hashfunc=hashlib.sha256))
        except MalformedPointError as e:
            raise ParseError(f"Invalid secp256k1 public key: {e}") from e

    @classmethod
    def from_hex(cls, hex_str: str) -> "Secp256k1PublicKey":
        return cls.from_bytes(_decode_hex(hex_str))

    @property
    def verifying_key(self) -> VerifyingKey:
        return self._verifying_key

    def get_algorithm_name(self) -> str:
        return ALGORITHM_NAME

    def as_bytes(self) -> bytes:
        return self._verifying_key.to_string("compressed")


class Secp256k1Context(Context):
    """Signing context for the secp256k1 curve."""

    def get_algorithm_name(self) -> str:
        return ALGORITHM_NAME

    def sign(self, message: bytes, private_key: PrivateKey) -> str:
        key = self._require_private_key(private_key)
        signature = key.signing_key.sign_deterministic(
            message,
            hashfunc=hashlib.sha256,
            sigencode=sigencode_string_canonize,
        )
        return signature.hex()

    def verify(self, signature: str, message: bytes, public_key: PublicKey) -> bool:
        key = self._require_public_key(public_key)
        try:
            sig_bytes = bytes.fromhex(signature)
            return key.verifying_key.verify(
                sig_bytes,
                message,
                hashfunc=hashlib.sha256,
                sigdecode=sigdecode_string,
            )
        except (ValueError, BadSignatureError, MalformedSignature) as e:
            logger.debug(f"Signature verification failed: {e}")
            return False

    def get_public_key(self, private_key: PrivateKey) -> PublicKey:
        key = self._require_private_key(private_key)
        return Secp256k1PublicKey(key.signing_key.get_verifying_key())

    def private_key_from_hex(self, hex_str: str) -> PrivateKey:
        return Secp256k1PrivateKey.from_hex(hex_str)

    def public_key_from_hex(self, hex_str: str) -> PublicKey:
        return Secp256k1PublicKey.from_hex(hex_str)

    @staticmethod
    def _require_private_key(private_key: PrivateKey) -> Secp256k1PrivateKey:
        if not isinstance(private_key, Secp256k1PrivateKey):
            raise TypeError(
                f"Expected a {ALGORITHM_NAME} private key, got {private_key.get_algorithm_name()}"
            )
        return private_key

    @staticmethod
    def _require_public_key(public_key: PublicKey) -> Secp256k1PublicKey:
        if not isinstance(public_key, Secp256k1PublicKey):
            raise TypeError(
                f"Expected a {ALGORITHM_NAME} public key, got {public_key.get_algorithm_name()}"
            )
        return public_key
