# tests/conftest.py
import numpy as np
import pytest


@pytest.fixture
def tmp_path_cwd(tmp_path, monkeypatch):
  monkeypatch.chdir(tmp_path)
  return tmp_path


@pytest.fixture
def rng():
    """Seeded generator so random rotations are reproducible."""
    return np.random.default_rng(12345)
