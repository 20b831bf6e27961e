from __future__ import annotations


class RbxgenError(RuntimeError):
    pass


class InvalidInvocationError(RbxgenError, ValueError):
    """Generator option set is neither the dry-run set nor the full set."""


class GeneratorLaunchError(RbxgenError):
    """The generator entry point could not be started at all."""

    def __init__(self, argv: list[str], cause: OSError) -> None:
        self.argv = list(argv)
        self.cause = cause
        super().__init__(f"could not launch generator: {' '.join(argv)} ({cause})")
