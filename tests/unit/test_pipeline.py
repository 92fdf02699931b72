from __future__ import annotations

import subprocess

import pytest

from podlocate.config import load_config
from podlocate.errors import MissingFileError, NotFoundError
from podlocate.pipeline import locate_and_delegate
from tests.helpers import make_project, write_xcconfig


@pytest.fixture()
def settings(monkeypatch):
    monkeypatch.delenv("PODLOCATE_PLATFORM", raising=False)
    return load_config()


def test_pipeline_runs_platform_helper(monkeypatch, tmp_path, settings) -> None:
    base_dir, sdk_root = make_project(tmp_path, ["podhelper_macos.rb", "podhelper.rb"])
    calls: list[dict] = []

    def fake_run(command, **kwargs):
        calls.append({"command": command, **kwargs})
        return subprocess.CompletedProcess(args=command, returncode=0)

    monkeypatch.setattr("podlocate.delegate.subprocess.run", fake_run)

    result = locate_and_delegate(base_dir, settings=settings, extra_args=["install"])

    assert result.root == str(sdk_root)
    assert result.delegate_path.name == "podhelper_macos.rb"
    assert result.executed is True
    assert len(calls) == 1
    assert calls[0]["command"][1:] == [str(result.delegate_path), "install"]
    assert calls[0]["cwd"] == str(base_dir)


def test_pipeline_dry_run(monkeypatch, tmp_path, settings) -> None:
    base_dir, _ = make_project(tmp_path, ["podhelper.rb"])
    monkeypatch.setattr(
        "podlocate.delegate.subprocess.run",
        lambda *args, **kwargs: pytest.fail("delegate should not run"),
    )

    result = locate_and_delegate(base_dir, settings=settings, dry_run=True)

    assert result.delegate_path.name == "podhelper.rb"
    assert result.executed is False


def test_pipeline_stops_on_missing_xcconfig(tmp_path, settings) -> None:
    with pytest.raises(MissingFileError):
        locate_and_delegate(tmp_path, settings=settings)


def test_pipeline_stops_when_sdk_has_no_helper(tmp_path, settings) -> None:
    write_xcconfig(tmp_path, [f"FLUTTER_ROOT={tmp_path / 'empty-sdk'}"])

    with pytest.raises(NotFoundError) as excinfo:
        locate_and_delegate(tmp_path, settings=settings)

    assert len(excinfo.value.searched) == 2
