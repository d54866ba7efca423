from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping, TypeVar

from envconf.errors import EnvConfError
from envconf.record.assign import assign_fields
from envconf.record.fields import field_names
from envconf.sources.file_reader import read_env_file
from envconf.sources.os_reader import read_env_from_os
from envconf.sources.paths import env_file_exists, resolve_env_path
from envconf.utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


def _collect_values(
    record: Any,
    env_file: str | None,
    cwd: str | Path | None,
    environ: Mapping[str, str] | None,
) -> Dict[str, str]:
    env_path = resolve_env_path(env_file, cwd)
    if env_file_exists(env_path):
        logger.debug("env_source_selected", source="file", path=str(env_path))
        return read_env_file(env_path)

    logger.debug("env_source_selected", source="os", path=str(env_path))
    names = field_names(record)
    values = read_env_from_os(names, environ)
    logger.debug("env_os_read", names=len(names))
    return values


def load(
    record: T,
    env_file: str | None = None,
    *,
    cwd: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> T:
    """Populate ``record``'s ``str`` fields from an env file or the process environment.

    ``env_file`` is a file name joined onto ``cwd`` (default: the process
    working directory); when it is ``None`` the name ``.env`` is used. If that
    file exists every value comes from it, otherwise each field name is looked
    up in ``environ`` (default: ``os.environ``). The record is mutated in place
    and returned.
    """
    try:
        values = _collect_values(record, env_file, cwd, environ)
        assign_fields(record, values)
    except EnvConfError as exc:
        logger.warning("config_load_failed", error=type(exc).__name__, detail=str(exc))
        raise
    return record
