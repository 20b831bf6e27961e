"""
Generator invocation model.

An invocation is an entry point (argv prefix) plus named path options. Only
two option sets are valid:
- dry-run: patches
- full:    patches, msgpack, json, values
"""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from rbxgen.config import DriverConfig, resolve_config
from rbxgen.errors import InvalidInvocationError
from rbxgen.mode import Mode
from rbxgen.paths import FULL_OPTIONS, PATCHES_DIR

OPTION_ORDER: tuple[str, ...] = tuple(FULL_OPTIONS)

_VALID_OPTION_SETS: Dict[frozenset, Mode] = {
    frozenset({"patches"}): Mode.DryRun,
    frozenset(OPTION_ORDER): Mode.Full,
}


class GeneratorInvocation(BaseModel):
    entry_point: List[str] = Field(..., description="Generator argv prefix, e.g. ['cargo','run','--bin',...].")
    options: Dict[str, str] = Field(..., description="Option name -> repo-relative path.")

    @field_validator("entry_point")
    @classmethod
    def _entry_point_not_empty(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("generator entry point is empty")
        return v

    @model_validator(mode="after")
    def _option_set_is_known(self) -> "GeneratorInvocation":
        keys = frozenset(self.options)
        if keys not in _VALID_OPTION_SETS:
            raise ValueError(
                f"invalid generator options {sorted(keys)}; expected "
                f"['patches'] or {sorted(OPTION_ORDER)}"
            )
        return self

    @classmethod
    def build(cls, entry_point: List[str], options: Dict[str, str]) -> "GeneratorInvocation":
        try:
            return cls(entry_point=entry_point, options=options)
        except ValidationError as e:
            raise InvalidInvocationError(str(e)) from e

    @property
    def mode(self) -> Mode:
        return _VALID_OPTION_SETS[frozenset(self.options)]

    def argv(self) -> List[str]:
        out = list(self.entry_point)
        for name in OPTION_ORDER:
            value = self.options.get(name)
            if value is not None:
                out.extend([f"--{name}", value])
        return out


def compose_invocation(mode: Mode, config: Optional[DriverConfig] = None) -> GeneratorInvocation:
    cfg = config or resolve_config()
    if mode is Mode.DryRun:
        options = {"patches": PATCHES_DIR}
    else:
        options = dict(FULL_OPTIONS)
    return GeneratorInvocation.build(list(cfg.generator), options)
