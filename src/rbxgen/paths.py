"""
Project root + fixed artifact locations.

Root resolution priority:
1) RBXGEN_ROOT env var
2) Walk upwards from the start path to the first folder holding patches/
3) Fallback: the start path itself
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

PROJECT_ROOT_ENV = "RBXGEN_ROOT"
ROOT_MARKERS = ("patches",)

PATCHES_DIR = "patches"
MSGPACK_PATH = "rbx_reflection_database/database.msgpack"
JSON_PATH = "rbx_dom_lua/src/database.json"
VALUES_PATH = "rbx_dom_lua/src/allValues.json"

# Option name -> repo-relative path, in the order the generator receives them.
FULL_OPTIONS: Dict[str, str] = {
    "patches": PATCHES_DIR,
    "msgpack": MSGPACK_PATH,
    "json": JSON_PATH,
    "values": VALUES_PATH,
}
OUTPUT_OPTIONS: tuple[str, ...] = ("msgpack", "json", "values")


@dataclass(frozen=True)
class ProjectPaths:
    root: Path

    def outputs(self) -> Dict[str, Path]:
        return {name: self.root / FULL_OPTIONS[name] for name in OUTPUT_OPTIONS}


def resolve_project_root(start: Optional[Path] = None) -> Path:
    env = os.getenv(PROJECT_ROOT_ENV, "").strip()
    if env:
        p = Path(env).expanduser().resolve()
        if p.is_dir():
            return p

    base = (start or Path.cwd()).resolve()
    for folder in [base] + list(base.parents):
        if any((folder / m).is_dir() for m in ROOT_MARKERS):
            return folder

    return base


def safe_relpath(root: Path, path: Path) -> str:
    root = root.resolve()
    path = path.resolve()
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return str(path)
