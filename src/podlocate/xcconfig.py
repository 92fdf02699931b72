"""Read the Flutter-generated xcconfig and extract the SDK root."""

from __future__ import annotations

import logging
from pathlib import Path

from podlocate.config import LocatorSettings
from podlocate.errors import MissingFileError, NotFoundError, PodlocateError
from podlocate.util.paths import absolute_path

logger = logging.getLogger(__name__)


def xcconfig_path(base_dir: str | Path, relative_path: str | Path) -> Path:
    """Return the absolute xcconfig location under ``base_dir``."""
    return absolute_path(base_dir, relative_path)


def resolve_root(base_dir: str | Path, *, settings: LocatorSettings) -> str:
    """Return the value following the marker on the first matching line.

    The value is only whitespace-trimmed; it is not checked for existence.
    """

    path = xcconfig_path(base_dir, settings.xcconfig.relative_path)
    if not path.exists():
        raise MissingFileError(path, hint=settings.xcconfig.missing_hint)

    marker = settings.xcconfig.marker
    key = marker.rstrip("=").strip()
    for line in _read_lines(path):
        if marker not in line:
            continue
        value = line.split(marker)[1].strip()
        if not value:
            raise NotFoundError(f"{key} is empty in {path}", searched=[path])
        logger.debug("Resolved %s=%s from %s", key, value, path)
        return value

    raise NotFoundError(f"{key} not found in {path}", searched=[path])


def read_xcconfig(path: Path, *, hint: str = "Run `flutter pub get` first.") -> dict[str, str]:
    """Parse ``KEY=value`` lines into an ordered mapping; later keys win."""

    if not path.exists():
        raise MissingFileError(path, hint=hint)

    entries: dict[str, str] = {}
    for raw in _read_lines(path):
        line = raw.strip()
        if not line or line.startswith("//") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        entries[key.strip()] = value.strip()
    return entries


def _read_lines(path: Path) -> list[str]:
    # Undecodable bytes survive as surrogates so paths round-trip through os.fsencode.
    try:
        with path.open("r", encoding="utf-8", errors="surrogateescape") as handle:
            return handle.readlines()
    except OSError as exc:
        raise PodlocateError(f"Could not read {path}: {exc.strerror or exc}") from exc


__all__ = ["read_xcconfig", "resolve_root", "xcconfig_path"]
