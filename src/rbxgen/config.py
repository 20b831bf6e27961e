"""
Driver config persistence (<root>/rbxgen.json) + env overrides.
"""

from __future__ import annotations

import json
import logging
import os
import shlex
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Optional, Tuple

from rbxgen.paths import ProjectPaths, resolve_project_root

logger = logging.getLogger(__name__)

CONFIG_FILE = "rbxgen.json"
GENERATOR_ENV = "RBXGEN_GENERATOR"

DEFAULT_GENERATOR: Tuple[str, ...] = ("cargo", "run", "--bin", "generate_reflection", "--")


@dataclass(frozen=True)
class DriverConfig:
    root: Path = field(default_factory=Path.cwd)
    generator: Tuple[str, ...] = DEFAULT_GENERATOR

    @property
    def paths(self) -> ProjectPaths:
        return ProjectPaths(root=self.root)

    @staticmethod
    def from_dict(d: dict, root: Path) -> "DriverConfig":
        gen = d.get("generator")
        if isinstance(gen, str):
            try:
                gen = shlex.split(gen)
            except ValueError as e:
                logger.warning("ignoring generator %r: %s", gen, e)
                gen = None
        if not isinstance(gen, list) or not gen or not all(isinstance(x, str) for x in gen):
            gen = list(DEFAULT_GENERATOR)
        return DriverConfig(root=root, generator=tuple(gen))


def config_path(project_root: Path) -> Path:
    return project_root / CONFIG_FILE


def load_config(project_root: Path) -> DriverConfig:
    p = config_path(project_root)
    if not p.exists():
        return DriverConfig(root=project_root)
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning("ignoring unreadable %s: %s", p, e)
        return DriverConfig(root=project_root)
    if isinstance(data, dict):
        return DriverConfig.from_dict(data, root=project_root)
    logger.warning("ignoring %s: expected a JSON object", p)
    return DriverConfig(root=project_root)


def apply_env(cfg: DriverConfig) -> DriverConfig:
    env = os.getenv(GENERATOR_ENV, "").strip()
    if not env:
        return cfg
    try:
        argv = shlex.split(env)
    except ValueError as e:
        logger.warning("ignoring %s=%r: %s", GENERATOR_ENV, env, e)
        return cfg
    return replace(cfg, generator=tuple(argv))


def resolve_config(start: Optional[Path] = None) -> DriverConfig:
    root = resolve_project_root(start)
    return apply_env(load_config(root))
