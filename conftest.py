import os
import pytest

_POINTS_ENV = ("POINTS_HOST", "POINTS_PORT", "POINTS_PARSE_POLICY", "POINTS_LOG_LEVEL")


@pytest.fixture(autouse=True)
def _isolate_points_env(monkeypatch):
    # Settings read POINTS_* from the environment; tests must not inherit the shell's.
    for name in _POINTS_ENV:
        if name in os.environ:
            monkeypatch.delenv(name)
