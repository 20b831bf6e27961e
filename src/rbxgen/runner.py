"""
Runs the reflection generator for a selected mode.

One synchronous subprocess per run. The generator's exit status is returned
unchanged; nothing is retried, cleaned up or rolled back here.
"""

from __future__ import annotations

import logging
import signal
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from rbxgen.config import DriverConfig, resolve_config
from rbxgen.digest import digest_outputs
from rbxgen.errors import GeneratorLaunchError
from rbxgen.invocation import GeneratorInvocation, compose_invocation
from rbxgen.mode import Mode
from rbxgen.paths import safe_relpath

logger = logging.getLogger(__name__)

# Shell convention for a child terminated by signal N.
SIGNAL_EXIT_BASE = 128


@dataclass(frozen=True)
class RunResult:
    mode: Mode
    argv: List[str]
    returncode: int
    digests: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def _exit_status(returncode: int) -> int:
    if returncode < 0:
        signum = -returncode
        try:
            name = signal.Signals(signum).name
        except ValueError:
            name = str(signum)
        logger.error("generator terminated by signal %s", name)
        return SIGNAL_EXIT_BASE + signum
    return returncode


def run_generator(invocation: GeneratorInvocation, cwd: Path) -> int:
    argv = invocation.argv()
    logger.info("running generator (%s): %s", invocation.mode.value, " ".join(argv))
    try:
        p = subprocess.run(argv, cwd=str(cwd))
    except OSError as e:
        raise GeneratorLaunchError(argv, e) from e
    rc = _exit_status(p.returncode)
    if rc != 0:
        logger.error("generator failed (exit=%d)", rc)
    return rc


def run(mode: Mode, config: Optional[DriverConfig] = None) -> RunResult:
    cfg = config or resolve_config()
    invocation = compose_invocation(mode, cfg)
    rc = run_generator(invocation, cfg.root)

    digests: Dict[str, str] = {}
    if rc == 0 and mode is Mode.Full:
        outputs = cfg.paths.outputs()
        digests = digest_outputs(cfg.paths)
        for name, digest in digests.items():
            logger.info("%s %s  %s", name, digest, safe_relpath(cfg.root, outputs[name]))

    return RunResult(mode=mode, argv=invocation.argv(), returncode=rc, digests=digests)


def compose_and_run(mode: Mode, config: Optional[DriverConfig] = None) -> int:
    return run(mode, config).returncode
