"""
Core Exceptions

Base exception classes for the library.
"""

from .base import (
    ATProtoError,
    RequestPrepareError,
    MissingActiveSessionError,
    InvalidRequestURLError,
    EmptyServiceEndpointError,
    APIError,
    BadRequestError,
    UnauthorizedError,
    ForbiddenError,
    NotFoundError,
    PayloadTooLargeError,
    RateLimitError,
    InternalServerError,
    MethodNotImplementedError,
    BadGatewayError,
    ServiceUnavailableError,
    GatewayTimeoutError,
    ResponseDecodeError,
    error_for_status,
)

__all__ = [
    "ATProtoError",
    "RequestPrepareError",
    "MissingActiveSessionError",
    "InvalidRequestURLError",
    "EmptyServiceEndpointError",
    "APIError",
    "BadRequestError",
    "UnauthorizedError",
    "ForbiddenError",
    "NotFoundError",
    "PayloadTooLargeError",
    "RateLimitError",
    "InternalServerError",
    "MethodNotImplementedError",
    "BadGatewayError",
    "ServiceUnavailableError",
    "GatewayTimeoutError",
    "ResponseDecodeError",
    "error_for_status",
]
