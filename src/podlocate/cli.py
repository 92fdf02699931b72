"""Command-line entry points for podlocate."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional

import typer

from podlocate.config import ConfigError, LocatorSettings, dump_example_config, load_config
from podlocate.delegate import candidate_paths, find_delegate
from podlocate.errors import PodlocateError
from podlocate.pipeline import locate_and_delegate
from podlocate.util.logging import configure_logging
from podlocate.xcconfig import read_xcconfig, resolve_root, xcconfig_path

app = typer.Typer(add_completion=False, help="Locate the Flutter pod helper and delegate to it")

BASE_DIR_OPTION = typer.Option(Path("."), "--base-dir", "-C", help="Platform directory holding ephemeral/")
CONFIG_OPTION = typer.Option(None, "--config", help="YAML/TOML/JSON file merged over the defaults")
PLATFORM_OPTION = typer.Option(None, "--platform", "-p", help="Platform profile (default from config)")


def _settings(config: Optional[Path], platform: Optional[str]) -> LocatorSettings:
    try:
        settings = load_config(config, platform=platform)
    except ConfigError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2) from exc
    configure_logging(level=settings.runtime.log_level, log_path=settings.runtime.log_file)
    return settings


def _echo_path(value: str | Path) -> None:
    # Raw bytes keep non-UTF-8 path segments intact for shell substitution.
    typer.echo(os.fsencode(value))


def _fail(exc: PodlocateError) -> typer.Exit:
    typer.echo(f"Error: {exc}", err=True)
    return typer.Exit(code=1)


@app.command()
def root(
    base_dir: Path = BASE_DIR_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
    platform: Optional[str] = PLATFORM_OPTION,
) -> None:
    """Print the SDK root recorded in the generated xcconfig."""

    settings = _settings(config, platform)
    try:
        _echo_path(resolve_root(base_dir, settings=settings))
    except PodlocateError as exc:
        raise _fail(exc) from exc


@app.command()
def locate(
    base_dir: Path = BASE_DIR_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
    platform: Optional[str] = PLATFORM_OPTION,
) -> None:
    """Print the pod helper that would be delegated to."""

    settings = _settings(config, platform)
    try:
        sdk_root = resolve_root(base_dir, settings=settings)
        found = find_delegate(candidate_paths(sdk_root, settings.candidate_suffixes))
    except PodlocateError as exc:
        raise _fail(exc) from exc
    _echo_path(found)


@app.command(context_settings={"allow_extra_args": True, "ignore_unknown_options": True})
def run(
    ctx: typer.Context,
    base_dir: Path = BASE_DIR_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
    platform: Optional[str] = PLATFORM_OPTION,
    dry_run: bool = typer.Option(False, "--dry-run", help="Locate the helper without running it"),
) -> None:
    """Resolve the SDK root and run its pod helper; extra args are passed through."""

    settings = _settings(config, platform)
    extra_args: List[str] = list(ctx.args)
    try:
        result = locate_and_delegate(base_dir, settings=settings, dry_run=dry_run, extra_args=extra_args)
    except PodlocateError as exc:
        raise _fail(exc) from exc
    if dry_run:
        _echo_path(result.delegate_path)


@app.command()
def show(
    base_dir: Path = BASE_DIR_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
    platform: Optional[str] = PLATFORM_OPTION,
) -> None:
    """Dump every KEY=value pair from the generated xcconfig."""

    settings = _settings(config, platform)
    path = xcconfig_path(base_dir, settings.xcconfig.relative_path)
    try:
        entries = read_xcconfig(path, hint=settings.xcconfig.missing_hint)
    except PodlocateError as exc:
        raise _fail(exc) from exc
    for key, value in entries.items():
        typer.echo(f"{key}={value}")


@app.command("dump-config")
def dump_config(dest: Path = typer.Argument(..., help="Destination .yaml or .json file")) -> None:
    """Write the default configuration to a file for editing."""

    try:
        dump_example_config(dest)
    except ConfigError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2) from exc
    typer.echo(f"Wrote {dest}")


def main() -> None:
    app()


__all__ = ["main", "app"]
