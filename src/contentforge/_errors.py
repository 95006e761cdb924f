"""Exceptions raised by contentforge."""


class NoProviderAvailable(RuntimeError):
    """No active credential can serve the request."""

    def __init__(self, message: str = "No AI model available. Configure an API key in Settings."):
        super().__init__(message)


class ProviderError(Exception):
    """A provider rejected a request, or the provider is not supported.

    Attributes:
        provider: Provider name the error came from.
        status_code: HTTP status returned by the provider (400 for
            configuration errors such as an unsupported provider).
        message: Human-readable message extracted from the provider's error body.
    """

    def __init__(self, provider: str, status_code: int, message: str):
        super().__init__(message)
        self.provider = provider
        self.status_code = status_code
        self.message = message

    def __repr__(self) -> str:
        return (
            f"ProviderError(provider={self.provider!r}, "
            f"status_code={self.status_code}, message={self.message!r})"
        )
