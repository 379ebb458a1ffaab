"""
Base Exception Classes

Core exception hierarchy for the library.

Errors fall into three groups:
    - RequestPrepareError: raised before any network I/O
    - APIError: the server answered with a non-success status
    - ResponseDecodeError: the response body did not match the output model
"""

from typing import Optional, Dict, Any, Type


class ATProtoError(Exception):
    """Base exception for all library errors."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None
    ):
        self.message = message
        self.details = details or {}
        self.original_exception = original_exception
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details
        }


class RequestPrepareError(ATProtoError):
    """A request could not be prepared; nothing was sent."""


class MissingActiveSessionError(RequestPrepareError):
    """No session, or the session carries no access token."""

    def __init__(self, message: str = "There is no active session."):
        super().__init__(message)


class InvalidRequestURLError(RequestPrepareError):
    """The request URL could not be constructed."""

    def __init__(
        self,
        message: str = "The request URL is invalid.",
        url: Optional[str] = None,
        original_exception: Optional[Exception] = None
    ):
        super().__init__(message, original_exception=original_exception)
        self.url = url
        self.details["url"] = url


class EmptyServiceEndpointError(InvalidRequestURLError):
    """The service endpoint (or PDS URL) is an empty string."""

    def __init__(self, message: str = "The service endpoint is empty."):
        super().__init__(message, url="")


class APIError(ATProtoError):
    """The XRPC server returned a non-success status."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        error: Optional[str] = None,
        endpoint: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, details)
        self.status_code = status_code
        self.error = error
        self.endpoint = endpoint
        self.headers = headers or {}

        # Add to details
        self.details["status_code"] = status_code
        self.details["error"] = error
        self.details["endpoint"] = endpoint


class BadRequestError(APIError):
    """HTTP 400."""


class UnauthorizedError(APIError):
    """HTTP 401."""


class ForbiddenError(APIError):
    """HTTP 403."""


class NotFoundError(APIError):
    """HTTP 404."""


class PayloadTooLargeError(APIError):
    """HTTP 413."""


class RateLimitError(APIError):
    """HTTP 429."""

    @property
    def ratelimit_reset(self) -> Optional[int]:
        """Epoch seconds at which the rate limit window resets, if sent."""
        value = self.headers.get("ratelimit-reset")
        if value is None or not value.isdigit():
            return None
        return int(value)


class InternalServerError(APIError):
    """HTTP 500."""


class MethodNotImplementedError(APIError):
    """HTTP 501."""


class BadGatewayError(APIError):
    """HTTP 502."""


class ServiceUnavailableError(APIError):
    """HTTP 503."""


class GatewayTimeoutError(APIError):
    """HTTP 504."""


STATUS_ERRORS: Dict[int, Type[APIError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    413: PayloadTooLargeError,
    429: RateLimitError,
    500: InternalServerError,
    501: MethodNotImplementedError,
    502: BadGatewayError,
    503: ServiceUnavailableError,
    504: GatewayTimeoutError,
}


def error_for_status(status_code: int) -> Type[APIError]:
    """Get the APIError subclass for an HTTP status code."""
    return STATUS_ERRORS.get(status_code, APIError)


class ResponseDecodeError(ATProtoError):
    """The response body could not be decoded into the expected model."""

    def __init__(
        self,
        message: str,
        model: Optional[str] = None,
        original_exception: Optional[Exception] = None
    ):
        super().__init__(message, original_exception=original_exception)
        self.model = model
        self.details["model"] = model
