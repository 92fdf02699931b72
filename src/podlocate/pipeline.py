"""Resolve the SDK root and delegate to its pod helper in one pass."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from podlocate.config import LocatorSettings
from podlocate.delegate import delegate
from podlocate.xcconfig import resolve_root

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DelegationResult:
    root: str
    delegate_path: Path
    executed: bool


def locate_and_delegate(
    base_dir: str | Path,
    *,
    settings: LocatorSettings,
    dry_run: bool = False,
    extra_args: Sequence[str] = (),
) -> DelegationResult:
    """Run resolve-root then delegate; the first failure propagates."""

    root = resolve_root(base_dir, settings=settings)
    logger.info("SDK root resolved to %s", root)
    found = delegate(root, settings=settings, cwd=Path(base_dir), extra_args=extra_args, dry_run=dry_run)
    return DelegationResult(root=root, delegate_path=found, executed=not dry_run)


__all__ = ["DelegationResult", "locate_and_delegate"]
