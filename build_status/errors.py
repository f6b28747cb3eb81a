"""Errors surfaced to callers of the build status pipeline."""


class BuildStatusError(RuntimeError):
    """Base class for failures that abort a pipeline run."""


class AuthenticationError(BuildStatusError):
    """Raised when a service rejects the configured token."""


class MalformedResponseError(BuildStatusError):
    """Raised when a successful response does not carry valid JSON."""


class TransportError(BuildStatusError):
    """Raised when a service answers with an unexpected status."""
