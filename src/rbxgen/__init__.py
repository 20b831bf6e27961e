"""
rbxgen: regenerate the reflection database from patches.

  python -m rbxgen             full generation (msgpack + json + values)
  python -m rbxgen --dry-run   validate generation without writing outputs
"""

from __future__ import annotations

from rbxgen.errors import GeneratorLaunchError, InvalidInvocationError, RbxgenError
from rbxgen.invocation import GeneratorInvocation, compose_invocation
from rbxgen.mode import Mode, select_mode
from rbxgen.runner import RunResult, compose_and_run, run

__version__ = "0.1.0"

__all__ = [
    "GeneratorInvocation",
    "GeneratorLaunchError",
    "InvalidInvocationError",
    "Mode",
    "RbxgenError",
    "RunResult",
    "compose_and_run",
    "compose_invocation",
    "run",
    "select_mode",
]
