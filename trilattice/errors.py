"""Engine error types. The API layer maps these to HTTP status codes."""

from __future__ import annotations


class MalformedPayload(ValueError):
    """An import payload could not be parsed as a whole; nothing was applied."""


class InvalidStartRequest(ValueError):
    """A search was requested with no shape and no colored cells to derive one from."""


class SearchAlreadyRunning(RuntimeError):
    """A search is running and replacing it is disabled."""


class UnknownSession(KeyError):
    """No active session has the given handle."""
