import pytest

from devlog import emitter
from devlog.config import ENV_VARS

APP_TRACE = "stack traceback:\n\tsrc/App.lua:10: in function 'run'"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep DEVLOG_* variables from the outer environment out of tests."""
    for env_var in ENV_VARS.values():
        monkeypatch.delenv(env_var, raising=False)


@pytest.fixture(autouse=True)
def reset_default_console(monkeypatch):
    monkeypatch.setattr(emitter, "_default_console", None)
