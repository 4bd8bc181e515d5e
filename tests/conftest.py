"""
Pytest configuration and shared fixtures.

Every test gets an isolated XDG data dir and config cache, and a FakeHost that records
what the feature asks of the browser, prompt and process model.
"""
import pytest

import recentdirs.core.logger as logger_mod
from recentdirs.config import reset_config
from recentdirs.core.host import Host
from recentdirs.core.views import View
from recentdirs.core.entry import Listing


class FakeHost(Host):
    def __init__(self, answer=None):
        super().__init__()
        self.answer = answer
        self.prompts = []
        self.opened = []
        self.replayed = []
        self.messages = []

    def select(self, prompt, labels):
        self.prompts.append((prompt, list(labels)))
        return self.answer

    def open_directory(self, target):
        self.opened.append(target)
        if isinstance(target, Listing):
            return View(target.name, target.name, listing=target)
        return View(target, target)

    def replay(self, command):
        self.replayed.append(command)
        return View(command.view_name, command.directory, command=command)

    def message(self, text):
        self.messages.append(text)


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    for name in ("RECENTDIRS_CONFIG", "RECENTDIRS_HISTORY_FILE", "RECENTDIRS_LOG_LEVEL", "RECENTDIRS_LOG_DIR"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "xdg"))
    # Keep the CLI from attaching handlers to pytest's captured streams
    monkeypatch.setattr(logger_mod, "_setup_done", True)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def host():
    return FakeHost()


@pytest.fixture
def history_file(tmp_path):
    return tmp_path / "data" / "history.json"
