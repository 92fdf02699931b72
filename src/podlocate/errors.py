"""Exception hierarchy for locator failures."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable


class PodlocateError(RuntimeError):
    """Base class for fatal locate/delegate failures."""


class MissingFileError(PodlocateError):
    """Raised when the generated xcconfig does not exist."""

    def __init__(self, path: Path, *, hint: str = "Run `flutter pub get` first.") -> None:
        self.path = path
        super().__init__(f"Missing {path}. {hint}")


class NotFoundError(PodlocateError):
    """Raised when a key or a delegate file cannot be found."""

    def __init__(self, message: str, *, searched: Iterable[str | Path] = ()) -> None:
        self.searched = tuple(str(item) for item in searched)
        super().__init__(message)


class DelegateFailedError(PodlocateError):
    """Raised when the delegate helper exits with a non-zero status."""

    def __init__(self, path: Path, returncode: int) -> None:
        self.path = path
        self.returncode = returncode
        super().__init__(f"Delegate {path} exited with status {returncode}")


__all__ = ["DelegateFailedError", "MissingFileError", "NotFoundError", "PodlocateError"]
