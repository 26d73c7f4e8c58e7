"""Unified exception hierarchy for keyscope.

All keyscope exceptions inherit from KeyscopeException, enabling unified
error handling across the browser, session and store layers.

Categories:
- BusinessException: Validation errors, missing resources, unmet preconditions
- InfrastructureException: Store transport and protocol failures
"""

from __future__ import annotations


# =============================================================================
# Base Exception
# =============================================================================


class KeyscopeException(Exception):
    """Base exception for all keyscope errors.

    Carries an optional error code and context dict for structured error data.
    Views catch KeyscopeException to degrade into an inline error state
    instead of failing the process.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "NO_ACTIVE_SESSION").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Business Exceptions
# =============================================================================


class BusinessException(KeyscopeException):
    """Domain rule violations and input errors."""


class ValidationException(BusinessException):
    """Input validation failures, raised before any network call."""


class ResourceNotFoundException(BusinessException):
    """Requested key or connection does not exist."""


class PreconditionFailedException(BusinessException):
    """A precondition for the operation was not met."""


class NoActiveSessionException(PreconditionFailedException):
    """No store connection is active."""

    def __init__(self, message: str = "No active connection", context: dict | None = None) -> None:
        super().__init__(message, code="NO_ACTIVE_SESSION", context=context)


# =============================================================================
# Infrastructure Exceptions
# =============================================================================


class InfrastructureException(KeyscopeException):
    """Infrastructure failures: store connectivity, protocol errors."""


class BackendException(InfrastructureException):
    """The store rejected a command or the transport failed.

    The underlying client error is chained as ``__cause__``.
    """

    def __init__(self, message: str, operation: str | None = None, context: dict | None = None) -> None:
        ctx = dict(context or {})
        if operation is not None:
            ctx.setdefault("operation", operation)
        super().__init__(message, code="BACKEND_ERROR", context=ctx)
        self.operation = operation
