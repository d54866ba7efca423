from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List

from envconf.errors import FileOpenError, ScanError
from envconf.utils.logger import get_logger

logger = get_logger(__name__)


def make_value_map(lines: Iterable[str]) -> Dict[str, str]:
    """Build a value map from ``KEY=VALUE`` lines.

    Only a line with exactly one ``=`` yields a key/value pair. Any other line,
    including one whose value itself contains ``=``, becomes a key equal to the
    whole line with an empty value.
    """
    values: Dict[str, str] = {}
    for line in lines:
        parts = line.split("=")
        if len(parts) == 2:
            values[parts[0]] = parts[1]
            continue
        values[line] = ""
    return values


def _strip_line_ending(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def read_env_file(path: str | Path) -> Dict[str, str]:
    env_path = Path(path)
    try:
        handle = env_path.open("r", encoding="utf-8", newline="\n")
    except OSError as exc:
        raise FileOpenError(f"cannot open env file {env_path}: {exc}") from exc

    lines: List[str] = []
    with handle:
        try:
            for raw in handle:
                lines.append(_strip_line_ending(raw))
        except (OSError, UnicodeDecodeError) as exc:
            raise ScanError(f"failed reading env file {env_path}: {exc}") from exc

    values = make_value_map(lines)
    logger.debug("env_file_read", path=str(env_path), lines=len(lines), keys=len(values))
    return values
