from __future__ import annotations

import os
from pathlib import Path

from envconf.errors import WorkingDirectoryError

DEFAULT_ENV_FILE = ".env"


def resolve_env_path(override: str | None = None, cwd: str | Path | None = None) -> Path:
    """Join the env file name (default ``.env``) onto the working directory."""
    name = DEFAULT_ENV_FILE if override is None else override
    if cwd is None:
        try:
            cwd = os.getcwd()
        except OSError as exc:
            raise WorkingDirectoryError(f"cannot determine working directory: {exc}") from exc
    return Path(cwd) / name


def env_file_exists(path: str | Path) -> bool:
    # stat failures of any kind (missing, permission denied) count as absent
    try:
        os.stat(path)
    except OSError:
        return False
    return True
