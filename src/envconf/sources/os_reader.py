from __future__ import annotations

import os
from typing import Dict, Iterable, Mapping


def read_env_from_os(names: Iterable[str], environ: Mapping[str, str] | None = None) -> Dict[str, str]:
    """Look up each name in the environment; unset names map to ``""``."""
    env = os.environ if environ is None else environ
    return {name: env.get(name, "") for name in names}
