"""Path utilities shared by the locator steps."""

from __future__ import annotations

import os
from pathlib import Path


def absolute_path(base: str | Path, *parts: str | Path) -> Path:
    """Join ``parts`` onto ``base`` and return an absolute, user-expanded path.

    Symlinks are left alone so reported paths match what the operator typed.
    """
    joined = Path(base).expanduser().joinpath(*parts)
    return Path(os.path.abspath(joined))


__all__ = ["absolute_path"]
