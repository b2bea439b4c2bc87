"""Shared fixtures: every test gets its own tada home and working directory."""

import pytest


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Point TADA_HOME at a temp dir and drop any ambient token."""
    home = tmp_path / "home"
    monkeypatch.setenv("TADA_HOME", str(home))
    monkeypatch.delenv("TADA_TOKEN", raising=False)
    return home


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """A fresh working directory; the default data file lands here."""
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work
