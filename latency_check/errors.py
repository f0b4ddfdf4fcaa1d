"""Errors raised while checking a URL. All of them end the run with exit status 1."""


class LatencyCheckError(Exception):
    """Base class for every error the CLI reports."""


class UsageError(LatencyCheckError):
    """Raised when the command line cannot be parsed (missing URL, malformed header)."""


class ValidationError(LatencyCheckError):
    """Raised when the request options are inconsistent (body on GET/HEAD, bad timeout)."""


class TransportError(LatencyCheckError):
    """Raised when the HTTP exchange fails below the HTTP layer (DNS, connect, TLS, timeout)."""


class OutputError(LatencyCheckError):
    """Raised when the report file cannot be written."""
