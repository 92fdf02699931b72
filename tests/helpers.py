from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

HELPER_DIR = Path("packages") / "flutter_tools" / "bin"


def write_xcconfig(base_dir: Path, lines: Iterable[str]) -> Path:
    """Write a generated xcconfig under ``base_dir/ephemeral``."""

    path = base_dir / "ephemeral" / "Flutter-Generated.xcconfig"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    return path


def make_sdk(root: Path, helpers: Iterable[str]) -> list[Path]:
    """Create empty pod helper scripts inside a fake SDK checkout."""

    created: list[Path] = []
    for name in helpers:
        path = root / HELPER_DIR / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("# helper\n", encoding="utf-8")
        created.append(path)
    return created


def make_project(tmp_path: Path, helpers: Iterable[str]) -> tuple[Path, Path]:
    """Return ``(base_dir, sdk_root)`` wired together through the xcconfig."""

    sdk_root = tmp_path / "flutter"
    base_dir = tmp_path / "app" / "macos" / "Flutter"
    make_sdk(sdk_root, helpers)
    write_xcconfig(base_dir, ["// generated", f"FLUTTER_ROOT={sdk_root}", "FLUTTER_BUILD_NUMBER=1"])
    return base_dir, sdk_root


def reset_logging() -> None:
    """Drop handlers bound to streams owned by a previous test."""

    logger = logging.getLogger("podlocate")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
