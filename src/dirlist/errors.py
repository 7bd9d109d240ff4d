# src/dirlist/errors.py
from pathlib import Path


class DirlistError(Exception):
    """Base class for failures that abort a listing run."""

    def __init__(self, path: Path, cause: OSError, message: str):
        self.path = path
        self.cause = cause
        super().__init__(message)


class TraversalError(DirlistError):
    """A directory could not be read during the walk."""

    def __init__(self, path: Path, cause: OSError):
        reason = cause.strerror or str(cause)
        super().__init__(path, cause, f"failed to read directory {path}: {reason}")


class AttributeResolutionError(DirlistError):
    """Size or modification time of an entry is unavailable."""

    def __init__(self, path: Path, cause: OSError):
        reason = cause.strerror or str(cause)
        super().__init__(path, cause, f"failed to read attributes for {path}: {reason}")
