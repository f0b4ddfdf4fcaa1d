"""latency-check - time a single HTTP request and print a latency breakdown."""

__version__ = "1.0.0"
