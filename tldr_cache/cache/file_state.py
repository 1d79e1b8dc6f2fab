"""
File state snapshots for cache freshness checks.

This module captures the modification time of a path so callers can reason
about how old the cached content is.
"""

from dataclasses import dataclass
from pathlib import Path
import time
from typing import Optional


@dataclass(frozen=True)
class FileState:
    """
    Immutable file state snapshot.

    Attributes:
        mtime: Modification time (timestamp)
    """
    mtime: float

    @classmethod
    def from_path(cls, path: Path) -> "FileState":
        """
        Create FileState from a path.

        Args:
            path: File or directory to inspect

        Returns:
            FileState object representing the current state of the path

        Raises:
            FileNotFoundError: If the path does not exist
            OSError: If there are permission issues accessing the path
        """
        return cls(mtime=path.stat().st_mtime)

    @classmethod
    def probe(cls, path: Path) -> Optional["FileState"]:
        """Return the state of a path, or None if it cannot be stat'ed."""
        try:
            return cls.from_path(path)
        except OSError:
            return None

    def age(self, now: Optional[float] = None) -> float:
        """Seconds elapsed since the last modification."""
        if now is None:
            now = time.time()
        return now - self.mtime
