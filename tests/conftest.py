from __future__ import annotations

import pytest

from plotspec.core.settings import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch, tmp_path):
    monkeypatch.delenv("PLOTLY_MATHJAX_PATH", raising=False)
    monkeypatch.setenv("PLOTSPEC_STORAGE_ROOT", str(tmp_path / "runs"))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def mathjax_path(monkeypatch, tmp_path):
    path = tmp_path / "MathJax"
    path.mkdir()
    monkeypatch.setenv("PLOTLY_MATHJAX_PATH", str(path))
    get_settings.cache_clear()
    return str(path)
