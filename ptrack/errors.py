"""ptrack exceptions."""

from __future__ import annotations


class PtrackError(Exception):
    """Root exception for all ptrack errors."""


class ScanError(PtrackError):
    """Walking the tree under ``root`` failed at ``path``."""

    def __init__(self, root: str, path: str, cause: OSError) -> None:
        super().__init__(f"error walking directory {root}: {cause}")
        self.root = root
        self.path = path


class SuitePreparationError(PtrackError):
    """A fixture tree could not be materialized.

    ``cleanup_error`` is set when removing the half-built copy failed too.
    """

    def __init__(
        self,
        source: str,
        step: str,
        cause: BaseException,
        cleanup_error: OSError | None = None,
    ) -> None:
        msg = f"failed to {step} for suite {source}: {cause}"
        if cleanup_error is not None:
            msg = f"failed to delete temporary directory ({cleanup_error}) after {msg}"
        super().__init__(msg)
        self.source = source
        self.step = step
        self.cleanup_error = cleanup_error
