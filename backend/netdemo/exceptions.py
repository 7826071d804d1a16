"""
NetDemo — Custom Exception Hierarchy
======================================

What:  Application-specific exceptions for the handful of error cases the
       demo endpoints have.
How:   Each exception carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return the message as a plain-text body with the mapped status code.
Who:   Raised by services and route handlers; caught by global handlers.

Exception Hierarchy:
    NetDemoError (base)
    ├── ValidationError        → 400 Bad Request
    ├── MethodNotAllowedError  → 405 Method Not Allowed
    └── SerializationError     → 500 Internal Server Error

Unlike a JSON API, the message IS the response body, so messages are the
exact literals clients see ("num is not integer", ...).
"""

from typing import Any, Dict, Optional


class NetDemoError(Exception):
    """
    Base exception for all NetDemo application errors.

    Attributes:
        message:      Response body text (returned to the client verbatim)
        context:      Additional debug info (logged but NOT returned to client)
        status_code:  HTTP status the global handler responds with
    """

    status_code: int = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NetDemoError):
    """
    Raised when client input fails validation.

    When:    /square with a missing or non-integer `num` header, or a value
             below the lower bound.
    HTTP:    400 Bad Request
    """

    status_code = 400

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class MethodNotAllowedError(NetDemoError):
    """
    Raised when an endpoint restricted to one method receives another.

    When:    Anything other than POST on /incr.
    HTTP:    405 Method Not Allowed
    """

    status_code = 405

    def __init__(
        self,
        expected: str = "POST",
        received: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["expected"] = expected
        if received:
            ctx["received"] = received
        super().__init__(message=f"request method is not {expected}", context=ctx)
        self.expected = expected
        self.received = received


class SerializationError(NetDemoError):
    """
    Raised when a response payload cannot be encoded to JSON.

    When:    /users fails to serialize its UsersResponse (the fixed shape
             never does in practice).
    HTTP:    500 Internal Server Error, body = the encoder's error text
    """

    status_code = 500

    def __init__(
        self,
        message: str = "response serialization failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
