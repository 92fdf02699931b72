"""Locate the SDK pod helper and hand control to it."""

from __future__ import annotations

import logging
import subprocess
import sys
from collections.abc import Mapping, Sequence
from pathlib import Path

from podlocate.config import LocatorSettings
from podlocate.errors import DelegateFailedError, NotFoundError, PodlocateError
from podlocate.util.paths import absolute_path

logger = logging.getLogger(__name__)


def candidate_paths(root: str | Path, suffixes: Sequence[str | Path]) -> list[Path]:
    """Join each suffix onto ``root``, keeping priority order."""
    return [absolute_path(root, suffix) for suffix in suffixes]


def find_delegate(candidates: Sequence[Path]) -> Path:
    """Return the first existing candidate."""

    for candidate in candidates:
        if candidate.exists():
            return candidate
        logger.debug("Delegate candidate missing: %s", candidate)

    tried = "\n".join(str(candidate) for candidate in candidates)
    raise NotFoundError(f"Flutter podhelper not found. Tried:\n{tried}", searched=candidates)


def interpreter_for(path: Path, interpreters: Mapping[str, Sequence[str]]) -> list[str]:
    """Build the command prefix used to run ``path``."""

    suffix = path.suffix.lower()
    if suffix not in interpreters:
        known = ", ".join(sorted(interpreters)) or "<none>"
        raise PodlocateError(f"No interpreter configured for {path.name} (known suffixes: {known})")
    return [sys.executable if part == "{python}" else part for part in interpreters[suffix]]


def run_delegate(
    path: Path,
    *,
    settings: LocatorSettings,
    cwd: Path | None = None,
    extra_args: Sequence[str] = (),
    env: Mapping[str, str] | None = None,
) -> None:
    """Run the delegate as a subprocess; a non-zero exit is fatal."""

    command = [*interpreter_for(path, settings.runtime.interpreters), str(path), *extra_args]
    logger.info("Delegating to %s", " ".join(command))
    try:
        completed = subprocess.run(
            command,
            cwd=str(cwd) if cwd else None,
            env=dict(env) if env is not None else None,
            check=False,
        )
    except OSError as exc:
        raise PodlocateError(f"Could not start {command[0]} for {path}: {exc.strerror or exc}") from exc
    if completed.returncode != 0:
        raise DelegateFailedError(path, completed.returncode)


def delegate(
    root: str | Path,
    *,
    settings: LocatorSettings,
    cwd: Path | None = None,
    extra_args: Sequence[str] = (),
    env: Mapping[str, str] | None = None,
    dry_run: bool = False,
) -> Path:
    """Find the delegate under ``root`` and run it unless ``dry_run``."""

    found = find_delegate(candidate_paths(root, settings.candidate_suffixes))
    logger.info("Using pod helper %s", found)
    if not dry_run:
        run_delegate(found, settings=settings, cwd=cwd, extra_args=extra_args, env=env)
    return found


__all__ = ["candidate_paths", "delegate", "find_delegate", "interpreter_for", "run_delegate"]
