import os
from pathlib import Path

import pytest

from envconf.errors import WorkingDirectoryError
from envconf.sources.paths import DEFAULT_ENV_FILE, env_file_exists, resolve_env_path


def test_resolve_defaults_to_dotenv_in_cwd(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert resolve_env_path() == Path(os.getcwd()) / DEFAULT_ENV_FILE
    assert resolve_env_path().name == ".env"


def test_resolve_uses_override_name(tmp_path: Path):
    assert resolve_env_path("prod.env", cwd=tmp_path) == tmp_path / "prod.env"


def test_resolve_wraps_getcwd_failure(monkeypatch):
    def _boom():
        raise FileNotFoundError("cwd was removed")

    monkeypatch.setattr(os, "getcwd", _boom)
    with pytest.raises(WorkingDirectoryError) as info:
        resolve_env_path()
    assert isinstance(info.value.__cause__, FileNotFoundError)


def test_env_file_exists(tmp_path: Path):
    env_path = tmp_path / ".env"
    assert env_file_exists(env_path) is False
    env_path.write_text("FOO=bar\n")
    assert env_file_exists(env_path) is True


def test_stat_errors_count_as_missing(tmp_path: Path, monkeypatch):
    def _denied(path):
        raise PermissionError("denied")

    monkeypatch.setattr(os, "stat", _denied)
    assert env_file_exists(tmp_path / ".env") is False
