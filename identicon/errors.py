"""Exception hierarchy for identicon generation."""

from __future__ import annotations


class IdenticonError(Exception):
    """Base class for every error raised by this package."""


class PreconditionError(IdenticonError, ValueError):
    """A pipeline stage received input it cannot work with (e.g. a digest shorter than 3 bytes)."""


class PipelineError(IdenticonError):
    """A transform failed; the original exception is chained as ``__cause__``."""

    def __init__(self, transform_id: str, message: str) -> None:
        super().__init__(f"{transform_id} failed: {message}")
        self.transform_id = transform_id


class PersistenceError(IdenticonError, OSError):
    """Encoding or writing the finished image failed.

    The computed image is still valid, so saving can be retried without
    re-running the pipeline.
    """
