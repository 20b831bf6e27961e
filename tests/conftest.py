from __future__ import annotations

# Repo-under-test src/ must win over any installed copy of rbxgen.

import json
import shlex
import sys
from dataclasses import dataclass
from pathlib import Path

_SRC = (Path(__file__).resolve().parents[1] / "src").resolve()
if str(_SRC) in sys.path:
    sys.path.remove(str(_SRC))
sys.path.insert(0, str(_SRC))

import pytest  # noqa: E402

from rbxgen.config import DriverConfig  # noqa: E402

# Stand-in for the real generator: logs its argv, writes only the outputs it
# is handed, exits with FAKE_GEN_EXIT (or dies by FAKE_GEN_SIGNAL).
FAKE_GENERATOR = r"""
import json, os, sys
from pathlib import Path

args = sys.argv[1:]
with open(os.environ["FAKE_GEN_LOG"], "a", encoding="utf-8") as f:
    f.write(json.dumps({"argv": args, "cwd": os.getcwd()}) + "\n")

sig = os.environ.get("FAKE_GEN_SIGNAL")
if sig:
    os.kill(os.getpid(), int(sig))

rc = int(os.environ.get("FAKE_GEN_EXIT", "0"))
if rc == 0:
    opts = dict(zip(args[::2], args[1::2]))
    patches = sorted(p.name for p in Path(opts["--patches"]).iterdir())
    for flag in ("--msgpack", "--json", "--values"):
        if flag in opts:
            out = Path(opts[flag])
            out.parent.mkdir(parents=True, exist_ok=True)
            body = json.dumps({"kind": flag, "patches": patches}, sort_keys=True) + "\n"
            out.write_text(body, encoding="utf-8")
sys.exit(rc)
"""

OUTPUTS = (
    "rbx_reflection_database/database.msgpack",
    "rbx_dom_lua/src/database.json",
    "rbx_dom_lua/src/allValues.json",
)


@dataclass(frozen=True)
class FakeGenerator:
    root: Path
    script: Path
    log: Path

    @property
    def argv(self) -> list[str]:
        return [sys.executable, str(self.script)]

    @property
    def config(self) -> DriverConfig:
        return DriverConfig(root=self.root, generator=tuple(self.argv))

    def calls(self) -> list[dict]:
        if not self.log.exists():
            return []
        lines = self.log.read_text(encoding="utf-8").splitlines()
        return [json.loads(line) for line in lines if line]

    def outputs(self) -> list[Path]:
        return [self.root / rel for rel in OUTPUTS]


@pytest.fixture
def fake_generator(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> FakeGenerator:
    root = tmp_path / "repo"
    (root / "patches").mkdir(parents=True)
    (root / "patches" / "Instance.yml").write_text("Change: {}\n", encoding="utf-8")
    (root / "patches" / "Part.yml").write_text("Add: {}\n", encoding="utf-8")

    script = tmp_path / "fake_generator.py"
    script.write_text(FAKE_GENERATOR, encoding="utf-8")
    log = tmp_path / "calls.jsonl"

    monkeypatch.setenv("FAKE_GEN_LOG", str(log))
    monkeypatch.delenv("FAKE_GEN_EXIT", raising=False)
    monkeypatch.delenv("FAKE_GEN_SIGNAL", raising=False)
    monkeypatch.setenv("RBXGEN_ROOT", str(root))
    monkeypatch.setenv("RBXGEN_GENERATOR", shlex.join([sys.executable, str(script)]))
    return FakeGenerator(root=root, script=script, log=log)
