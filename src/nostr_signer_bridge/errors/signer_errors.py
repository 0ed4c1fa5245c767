# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Signer Bridge Error Classes.

Error Hierarchy:
    SignerBridgeError (base)
    ├── MissingParameterError
    ├── NoSignerConfiguredError
    ├── DispatchFailedError
    ├── OperationCanceledOrFailedError
    ├── DecodeFailedError
    ├── SignerBusyError
    └── SignerTimeoutError

All errors:
    - Carry an EnumSignerErrorCode for classification
    - Accept ModelSignerErrorContext for bundled context parameters
    - Support proper error chaining with ``raise ... from e``
    - Are per-call; none of them is fatal to the process

Sanitization:
    Payload values (keys, plaintext, ciphertext, signatures) must never be
    placed in messages or extra context. Field names and operation kinds are
    safe.
"""

from __future__ import annotations

from uuid import UUID

from nostr_signer_bridge.enums import EnumSignerErrorCode, EnumSignerOperation
from nostr_signer_bridge.errors.model_signer_error_context import (
    ModelSignerErrorContext,
)


class SignerBridgeError(Exception):
    """Base error class for signer bridge failures.

    Structured Fields (via ModelSignerErrorContext):
        operation: Signer operation being performed
        tag: Correlation tag of the operation
        signer: Signer identity the call was routed to
        correlation_id: Identifier of the pending call

    Example:
        >>> context = ModelSignerErrorContext(
        ...     operation=EnumSignerOperation.GET_RELAYS,
        ...     signer="com.example.signer",
        ... )
        >>> raise SignerBridgeError("Operation failed", context=context)
    """

    def __init__(
        self,
        message: str,
        error_code: EnumSignerErrorCode | None = None,
        context: ModelSignerErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        """Initialize SignerBridgeError with structured fields.

        Args:
            message: Human-readable error message
            error_code: Error code (defaults to OPERATION_FAILED)
            context: Bundled signer context (operation, tag, signer, ...)
            **extra_context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or EnumSignerErrorCode.OPERATION_FAILED
        self.context = context or ModelSignerErrorContext()

        structured_context: dict[str, object] = dict(extra_context)
        if self.context.operation is not None:
            structured_context["operation"] = self.context.operation
        if self.context.tag is not None:
            structured_context["tag"] = self.context.tag
        if self.context.signer is not None:
            structured_context["signer"] = self.context.signer
        self.extra_context = structured_context

    @property
    def operation(self) -> EnumSignerOperation | None:
        return self.context.operation

    @property
    def correlation_id(self) -> UUID | None:
        return self.context.correlation_id

    def __str__(self) -> str:
        return f"[{self.error_code.value}] {self.message}"


class MissingParameterError(SignerBridgeError):
    """Raised when a required input is absent.

    Detected before either the fast path or the transport is attempted.

    Example:
        >>> raise MissingParameterError(
        ...     "Missing required parameter 'peer_pubkey'",
        ...     context=context,
        ...     parameter="peer_pubkey",
        ... )
    """

    def __init__(
        self,
        message: str,
        context: ModelSignerErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumSignerErrorCode.MISSING_PARAMETER,
            context=context,
            **extra_context,
        )


class NoSignerConfiguredError(SignerBridgeError):
    """Raised when no explicit or default signer identity is available."""

    def __init__(
        self,
        message: str,
        context: ModelSignerErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumSignerErrorCode.NO_SIGNER_CONFIGURED,
            context=context,
            **extra_context,
        )


class DispatchFailedError(SignerBridgeError):
    """Raised when the transport refuses a request at submission time.

    The waiter registered for the request is discarded before this error is
    raised, so no completion is ever expected for it.
    """

    def __init__(
        self,
        message: str,
        context: ModelSignerErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumSignerErrorCode.DISPATCH_FAILED,
            context=context,
            **extra_context,
        )


class OperationCanceledOrFailedError(SignerBridgeError):
    """Raised when the external signer was canceled or reported failure.

    Also used when a success signal arrives without a payload, and when an
    outstanding call is failed during shutdown.
    """

    def __init__(
        self,
        message: str,
        context: ModelSignerErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumSignerErrorCode.OPERATION_CANCELED_OR_FAILED,
            context=context,
            **extra_context,
        )


class DecodeFailedError(SignerBridgeError):
    """Raised when a result payload is malformed or lacks a mandatory field.

    Example:
        >>> raise DecodeFailedError(
        ...     "Result payload has no value for 'signature'",
        ...     context=context,
        ...     field_name="signature",
        ... )
    """

    def __init__(
        self,
        message: str,
        context: ModelSignerErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumSignerErrorCode.DECODE_FAILED,
            context=context,
            **extra_context,
        )


class SignerBusyError(SignerBridgeError):
    """Raised when a request is issued while another one is outstanding.

    Only raised under EnumInflightPolicy.REJECT. The outstanding call is left
    untouched.
    """

    def __init__(
        self,
        message: str,
        context: ModelSignerErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumSignerErrorCode.SIGNER_BUSY,
            context=context,
            **extra_context,
        )


class SignerTimeoutError(SignerBridgeError):
    """Raised when a configured timeout elapses before the completion arrives."""

    def __init__(
        self,
        message: str,
        context: ModelSignerErrorContext | None = None,
        timeout_seconds: float | None = None,
        **extra_context: object,
    ) -> None:
        if timeout_seconds is not None:
            extra_context["timeout_seconds"] = timeout_seconds
        super().__init__(
            message=message,
            error_code=EnumSignerErrorCode.TIMEOUT,
            context=context,
            **extra_context,
        )


__all__ = [
    "DecodeFailedError",
    "DispatchFailedError",
    "MissingParameterError",
    "NoSignerConfiguredError",
    "OperationCanceledOrFailedError",
    "SignerBridgeError",
    "SignerBusyError",
    "SignerTimeoutError",
]
