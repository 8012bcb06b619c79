import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

import systems.runtime as runtime_module
from systems.runtime import Runtime


@pytest.fixture
def runtime() -> Runtime:
    return Runtime()


@pytest.fixture
def default_runtime(monkeypatch) -> Runtime:
    """Fresh process-wide runtime for helpers called without one."""
    fresh = Runtime()
    monkeypatch.setattr(runtime_module, "_runtime", fresh)
    return fresh
