"""Exceptions raised by the triage gate.

Only ``ConfigurationError`` is fatal to a triage run. File and diff errors
are caught by the analyzers and the engine and degrade into a smaller
analyzed-file set.
"""


class TriageError(Exception):
    """Base class for triage gate failures."""


class ConfigurationError(TriageError):
    """Malformed or unreadable triage configuration."""


class FileReadError(TriageError):
    """A file could not be read as text."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class FileNotFound(FileReadError):
    """The requested file does not exist."""


class FileNotReadable(FileReadError):
    """The file exists but cannot be opened or decoded."""


class DiffRetrievalError(TriageError):
    """The changed-file list could not be obtained."""
