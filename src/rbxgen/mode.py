from __future__ import annotations

import logging
from enum import Enum
from typing import Sequence

logger = logging.getLogger(__name__)

DRY_RUN_FLAG = "--dry-run"


class Mode(str, Enum):
    DryRun = "dry-run"
    Full = "full"


def select_mode(args: Sequence[str]) -> Mode:
    """
    Only args[0] is inspected. Anything other than --dry-run (including no
    arguments at all) selects a full generation run.
    """
    if not args:
        return Mode.Full
    first = args[0]
    if first == DRY_RUN_FLAG:
        return Mode.DryRun
    logger.debug("ignoring unrecognized argument %r; running full generation", first)
    return Mode.Full
