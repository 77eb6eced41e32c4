"""File reading capability injected into analyzers.

PATTERN: Analyzers never touch the file system directly
CRITICAL: Every failure maps to FileNotFound or FileNotReadable
GOTCHA: Paths are repository-relative, the reader owns the root
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Union

from .exceptions import FileNotFound, FileNotReadable

logger = logging.getLogger(__name__)


class FileReader(ABC):
    """Read a repository-relative file as text."""

    @abstractmethod
    def read_text(self, path: str) -> str:
        """
        Read a file as text.

        Args:
            path: Path relative to the repository root

        Returns:
            File content

        Raises:
            FileNotFound: The file does not exist
            FileNotReadable: The file cannot be opened or decoded
        """


class LocalFileReader(FileReader):
    """Reads UTF-8 text files below a repository root."""

    def __init__(self, root: Union[str, Path] = ".", encoding: str = "utf-8"):
        self.root = Path(root)
        self.encoding = encoding

    def read_text(self, path: str) -> str:
        target = self.root / path
        try:
            # No newline translation, line numbers must match the diff
            with open(target, "r", encoding=self.encoding, newline="") as f:
                return f.read()
        except FileNotFoundError as e:
            raise FileNotFound(path, "file does not exist") from e
        except UnicodeDecodeError as e:
            raise FileNotReadable(path, f"not valid {self.encoding} text") from e
        except OSError as e:
            # Directories, permissions, broken links
            raise FileNotReadable(path, e.strerror or str(e)) from e


class InMemoryFileReader(FileReader):
    """Serves file contents from a dictionary, used for fixtures and tests."""

    def __init__(
        self,
        files: Optional[Dict[str, str]] = None,
        unreadable: Optional[Dict[str, str]] = None,
    ):
        """
        Args:
            files: Mapping of path to content
            unreadable: Mapping of path to failure reason
        """
        self.files = dict(files or {})
        self.unreadable = dict(unreadable or {})

    def read_text(self, path: str) -> str:
        if path in self.unreadable:
            raise FileNotReadable(path, self.unreadable[path])
        try:
            return self.files[path]
        except KeyError:
            raise FileNotFound(path, "file does not exist") from None
