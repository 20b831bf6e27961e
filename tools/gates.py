"""
Developer gates for rbxgen.

  python tools/gates.py --mode local   reformat, lint, test
  python tools/gates.py --mode ci      verify formatting, lint, test

RBXGEN_GATE_GENERATE=1 adds `rbxgen --dry-run` against the real patches, so
a patch that no longer generates fails the gates. Off by default because it
needs the cargo toolchain.
"""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

GENERATE_GATE_ENV = "RBXGEN_GATE_GENERATE"


def _run(argv: list[str], *, cwd: Path) -> None:
    p = subprocess.run(argv, cwd=str(cwd))
    if p.returncode != 0:
        raise SystemExit(f"FAILURE DETECTED: gate failed: {' '.join(argv)} (exit={p.returncode}).")


def generate_gate_enabled() -> bool:
    return os.getenv(GENERATE_GATE_ENV, "").strip() == "1"


def gate_commands(mode: str, *, py: str, generate: bool) -> List[List[str]]:
    cmds = [[py, "-m", "compileall", "-q", "src", "tests", "tools"]]
    if mode == "local":
        cmds.append([py, "-m", "black", "src", "tests", "tools"])
    else:
        cmds.append([py, "-m", "black", "--check", "src", "tests", "tools"])
    cmds.append([py, "-m", "ruff", "check", "src", "tests", "tools"])
    if generate:
        cmds.append([py, "-m", "rbxgen", "--dry-run"])
    cmds.append([py, "-m", "pytest", "-q"])
    return cmds


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="gates")
    ap.add_argument("--mode", choices=["local", "ci"], required=True)
    args = ap.parse_args(argv)

    root = Path(__file__).resolve().parents[1]
    for cmd in gate_commands(args.mode, py=sys.executable, generate=generate_gate_enabled()):
        _run(cmd, cwd=root)

    print("RBXGEN_GATES=GREEN")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
