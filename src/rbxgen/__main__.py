from __future__ import annotations

import logging
import os
import sys
from typing import List

from rbxgen.errors import GeneratorLaunchError
from rbxgen.mode import select_mode
from rbxgen.runner import compose_and_run

LOG_LEVEL_ENV = "RBXGEN_LOG_LEVEL"

# Shell convention for "command not found".
LAUNCH_FAILURE_EXIT = 127


def _configure_logging() -> None:
    level = os.getenv(LOG_LEVEL_ENV, "INFO").strip().upper() or "INFO"
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: List[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    _configure_logging()

    mode = select_mode(args)
    print(f"RBXGEN_MODE={mode.value}", file=sys.stderr)

    try:
        rc = compose_and_run(mode)
    except GeneratorLaunchError as e:
        print(f"FAILURE DETECTED: {e}", file=sys.stderr)
        rc = LAUNCH_FAILURE_EXIT

    print(f"RBXGEN_EXIT={rc}", file=sys.stderr)
    return rc


if __name__ == "__main__":
    raise SystemExit(main())
