# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Signer Error Context Configuration Model.

This module defines the model that bundles the structured fields attached to
every signer bridge error, keeping error constructors short while staying
strongly typed.
"""

from __future__ import annotations

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from nostr_signer_bridge.enums import EnumSignerOperation


class ModelSignerErrorContext(BaseModel):
    """Structured context for signer bridge errors.

    Attributes:
        operation: Signer operation being performed
        tag: Correlation tag of the operation, when a request was issued
        signer: Signer identity (package name) the call was routed to
        correlation_id: Per-call identifier of the pending waiter

    Example:
        >>> context = ModelSignerErrorContext(
        ...     operation=EnumSignerOperation.SIGN_EVENT,
        ...     tag=1002,
        ...     signer="com.greenart7c3.nostrsigner",
        ... )
        >>> raise DecodeFailedError("Missing signature", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    operation: EnumSignerOperation | None = Field(
        default=None,
        description="Signer operation being performed",
    )
    tag: int | None = Field(
        default=None,
        description="Correlation tag of the operation",
    )
    signer: str | None = Field(
        default=None,
        description="Signer identity (package name)",
    )
    correlation_id: UUID | None = Field(
        default=None,
        description="Identifier of the pending call",
    )

    @classmethod
    def with_correlation(
        cls,
        correlation_id: UUID | None = None,
        **kwargs: object,
    ) -> ModelSignerErrorContext:
        """Create a context, generating a correlation ID when none is given."""
        return cls(correlation_id=correlation_id or uuid4(), **kwargs)  # type: ignore[arg-type]


__all__ = ["ModelSignerErrorContext"]
