"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from sawtooth_cli.config import get_settings
from sawtooth_cli.signing import KeyLoader, Secp256k1Context, StaticIdentityProvider

# Arbitrary valid secp256k1 scalar
PRIVATE_KEY_HEX = "2f1e7b7a130d7ba9da0068b3bb0ba1d79e7e77110302c9f746c3c2a63fe40088"


def _write_key_file(home: Path, name: str, contents: str) -> Path:
    key_dir = home / ".sawtooth" / "keys"
    key_dir.mkdir(parents=True, exist_ok=True)
    path = key_dir / f"{name}.priv"
    path.write_text(contents, newline="")
    return path


@pytest.fixture
def write_key_file():
    """Helper that writes home/.sawtooth/keys/<name>.priv and returns its path."""
    return _write_key_file


@pytest.fixture
def private_key_hex() -> str:
    return PRIVATE_KEY_HEX


@pytest.fixture
def home(tmp_path) -> Path:
    """Empty home directory for key lookups."""
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def context() -> Secp256k1Context:
    return Secp256k1Context()


@pytest.fixture
def loader(context, home) -> KeyLoader:
    """KeyLoader pinned to user 'alice' and the temporary home."""
    identity = StaticIdentityProvider(user="alice", os_user="alice-os", home=home)
    return KeyLoader(context=context, identity=identity)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from SAWTOOTH_* variables and the settings cache."""
    monkeypatch.delenv("SAWTOOTH_KEY_NAME", raising=False)
    monkeypatch.delenv("SAWTOOTH_DEBUG", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
