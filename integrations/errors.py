"""Outbound integration errors."""


class IntegrationError(Exception):
    """Base error for outbound API calls."""

    def __init__(self, message: str = "Integration error"):
        self.message = message
        super().__init__(self.message)


class ConfigurationError(IntegrationError):
    """Integration disabled: credentials or endpoint missing."""


class TransientUpstreamError(IntegrationError):
    """Network failure, timeout, non-2xx status or malformed body."""

    def __init__(self, message: str = "Upstream request failed", retryable: bool = False):
        self.retryable = retryable
        super().__init__(message)
