"""Identity providers.

Key resolution needs three facts from the host: the ``USER`` variable,
the operating system's idea of the current user, and the home directory.
They sit behind a small interface so tests can pin them.
"""

import logging
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

try:
    import pwd
except ImportError:  # not available on Windows
    pwd = None

logger = logging.getLogger(__name__)


class IdentityProvider(ABC):
    """Source of the username and home directory used to locate keys."""

    @abstractmethod
    def env_username(self) -> Optional[str]:
        """Username from the ``USER`` environment variable, if set."""
        pass

    @abstractmethod
    def os_username(self) -> Optional[str]:
        """Username from the operating system's user database, if available."""
        pass

    @abstractmethod
    def home_dir(self) -> Optional[Path]:
        pass


class ProcessIdentityProvider(IdentityProvider):
    """Reads identity from the running process.

    Args:
        environ: Environment mapping, defaults to ``os.environ``
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self._environ = os.environ if environ is None else environ

    def env_username(self) -> Optional[str]:
        return self._environ.get("USER") or None

    def os_username(self) -> Optional[str]:
        entry = self._passwd_entry()
        return entry.pw_name if entry is not None else None

    def home_dir(self) -> Optional[Path]:
        home = self._environ.get("HOME")
        if home:
            return Path(home)

        entry = self._passwd_entry()
        if entry is not None and entry.pw_dir:
            return Path(entry.pw_dir)
        return None

    @staticmethod
    def _passwd_entry():
        if pwd is None:
            return None
        try:
            return pwd.getpwuid(os.getuid())
        except KeyError:
            logger.debug(f"No passwd entry for uid {os.getuid()}")
            return None


@dataclass(frozen=True)
class StaticIdentityProvider(IdentityProvider):
    """Fixed identity values, for tests and embedding callers."""

    user: Optional[str] = None
    os_user: Optional[str] = None
    home: Optional[Path] = None

    def env_username(self) -> Optional[str]:
        return self.user or None

    def os_username(self) -> Optional[str]:
        return self.os_user or None

    def home_dir(self) -> Optional[Path]:
        return Path(self.home) if self.home else None
