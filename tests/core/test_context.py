"""Tests for GotoContext."""

import dataclasses
from pathlib import Path, PurePosixPath

import pytest

from goto.core.config_store import FilesystemConfigStore
from goto.core.context import GotoContext, create_context, safe_cwd, safe_home
from tests.fakes.config_store import FakeConfigStore


def test_for_test_converts_paths() -> None:
    store = FakeConfigStore()

    ctx = GotoContext.for_test(store, cwd="/srv/app", home="/home/u")

    assert ctx.config_store is store
    assert ctx.cwd == PurePosixPath("/srv/app")
    assert ctx.home == PurePosixPath("/home/u")


def test_context_is_frozen() -> None:
    ctx = GotoContext.for_test(FakeConfigStore())

    with pytest.raises(dataclasses.FrozenInstanceError):
        ctx.cwd = PurePosixPath("/")  # type: ignore[misc]


def test_create_context_defaults_to_home_config(tmp_path: Path) -> None:
    ctx = create_context(cwd=tmp_path / "work", home=tmp_path)

    assert isinstance(ctx.config_store, FilesystemConfigStore)
    assert ctx.config_store.path() == tmp_path / ".goto.toml"
    assert ctx.home == PurePosixPath(tmp_path)
    assert ctx.cwd == PurePosixPath(tmp_path / "work")


def test_create_context_explicit_config(tmp_path: Path) -> None:
    ctx = create_context(cwd=tmp_path, home=tmp_path, config_path=tmp_path / "alt.toml")

    assert ctx.config_store.path() == tmp_path / "alt.toml"


def test_safe_cwd_and_home_from_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.chdir(tmp_path)

    assert safe_cwd() == (Path.cwd(), None)
    assert safe_home() == (tmp_path, None)


def test_safe_cwd_detects_deleted_directory(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    doomed = tmp_path / "doomed"
    doomed.mkdir()
    monkeypatch.chdir(doomed)
    doomed.rmdir()

    assert safe_cwd() == (None, "Current working directory no longer exists")


def test_safe_home_reports_missing_home(monkeypatch: pytest.MonkeyPatch) -> None:
    def no_home() -> Path:
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr(Path, "home", staticmethod(no_home))

    path, error = safe_home()

    assert path is None
    assert error is not None
    assert "home directory" in error
