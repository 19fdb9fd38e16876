"""Exceptions raised by trycmd."""


class InternalError(RuntimeError):
    """An invariant of trycmd itself was broken; never a user error."""
