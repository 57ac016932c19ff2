from __future__ import annotations


class PreconditionViolation(ValueError):
    """Input that cannot be encoded; raised before any output is written."""


class SinkWriteError(RuntimeError):
    """The output sink failed or accepted fewer bytes than requested."""


__all__ = ["PreconditionViolation", "SinkWriteError"]
