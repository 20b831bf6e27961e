from __future__ import annotations

import hashlib
from pathlib import Path
from typing import Dict

from rbxgen.paths import ProjectPaths

_CHUNK = 1024 * 1024


def sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(_CHUNK), b""):
            h.update(chunk)
    return h.hexdigest()


def digest_outputs(paths: ProjectPaths) -> Dict[str, str]:
    """
    SHA256 of every generated artifact present on disk, keyed by option name.
    The patches source is not an output and is never hashed.
    """
    out: Dict[str, str] = {}
    for name, p in paths.outputs().items():
        if p.is_file():
            out[name] = sha256_file(p)
    return out
