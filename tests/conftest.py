"""Shared pytest fixtures."""

from pathlib import Path

import pytest

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "schema"


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep tests independent of the developer's environment and config file."""
    for key in (
        "STRUCTGEN_PROFILE",
        "STRUCTGEN_SCHEMA_PATH",
        "STRUCTGEN_PACKAGE",
        "STRUCTGEN_DIALECT",
        "STRUCTGEN_GEN_JSON",
        "STRUCTGEN_GEN_COMMENT",
    ):
        monkeypatch.delenv(key, raising=False)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def fixtures_path() -> Path:
    return FIXTURES_PATH
