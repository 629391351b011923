# Every test runs against a fake home directory and a throwaway log directory,
# so nothing touches the real ~ of whoever runs the suite.

import os
import pytest

from config_fs_utils.shared.configuration_paths import BASE_DIR_ENV, LOG_DIR_ENV


@pytest.fixture(autouse=True)
def fake_home(tmp_path, monkeypatch):
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.setenv(LOG_DIR_ENV, str(tmp_path / "logs"))
    # set-then-delete so monkeypatch also undoes values loaded from a .env file
    monkeypatch.setenv(BASE_DIR_ENV, "unset")
    monkeypatch.delenv(BASE_DIR_ENV)
    return str(home)


@pytest.fixture
def work_dir(tmp_path):
    path = tmp_path / "work"
    path.mkdir()
    return path


def read(path):
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def mode_of(path):
    return os.stat(path).st_mode & 0o777
