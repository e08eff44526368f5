from typing import Optional


class CompletionSDKError(Exception):
    """Base class for every error raised by the SDK."""

    def __init__(self, message: str, original: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.message = message
        self.original = original


class ConfigurationError(CompletionSDKError):
    """Settings could not be loaded."""


class TransportError(CompletionSDKError):
    """Network, connection or protocol failure from the HTTP layer."""


class RequestTimeoutError(TransportError):
    """The request did not complete within the configured timeout."""


class EncodingError(CompletionSDKError):
    """The request body could not be serialized to JSON."""


class DecodingError(CompletionSDKError):
    """The response body could not be parsed into the expected type."""

    def __init__(
        self,
        message: str,
        original: Optional[Exception] = None,
        body: Optional[str] = None,
    ) -> None:
        super().__init__(message, original=original)
        self.body = body


class RequestFailedError(CompletionSDKError):
    """The API answered with a status other than 200."""

    def __init__(self, status_code: int, message: Optional[str] = None) -> None:
        super().__init__(message or f"Request failed with status {status_code}")
        self.status_code = status_code


class APIError(RequestFailedError):
    """Non-200 response carrying the provider's structured error body."""

    def __init__(
        self,
        status_code: int,
        message: str,
        error_type: Optional[str] = None,
        param: Optional[str] = None,
        code: Optional[str] = None,
    ) -> None:
        super().__init__(status_code, message)
        self.error_type = error_type
        self.param = param
        self.code = code

    def __str__(self) -> str:
        label = f" {self.error_type}" if self.error_type else ""
        return f"[{self.status_code}{label}] {self.message}"
