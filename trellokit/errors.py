"""Exceptions raised by trellokit before a request is sent."""


class ValidationsFailed(ValueError):
    """A local precondition failed; no request was issued."""
