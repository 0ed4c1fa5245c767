# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Signer Completion Model.

Represents the outcome the host delivers when the external signer returns.
Cancellation is an explicit status, not an exception.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from nostr_signer_bridge.enums import EnumCompletionStatus


class ModelSignerCompletion(BaseModel):
    """Completion event for an async signer request.

    Attributes:
        status: OK, CANCELED, or FAILED
        payload: Raw result bundle. Only meaningful when status is OK; an
            OK completion without a payload is treated as a failure.
        detail: Optional diagnostic text from the host (never payload data)

    Example:
        >>> ModelSignerCompletion.success({"result": "ciphertext"})
        >>> ModelSignerCompletion.canceled()
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    status: EnumCompletionStatus = Field(description="Completion outcome")
    payload: dict[str, Any] | None = Field(
        default=None,
        description="Raw result bundle from the signer",
    )
    detail: str | None = Field(default=None, description="Host diagnostic text")

    @classmethod
    def success(cls, payload: Mapping[str, object] | None) -> ModelSignerCompletion:
        return cls(
            status=EnumCompletionStatus.OK,
            payload=dict(payload) if payload is not None else None,
        )

    @classmethod
    def canceled(cls, detail: str | None = None) -> ModelSignerCompletion:
        return cls(status=EnumCompletionStatus.CANCELED, detail=detail)

    @classmethod
    def failed(cls, detail: str | None = None) -> ModelSignerCompletion:
        return cls(status=EnumCompletionStatus.FAILED, detail=detail)

    @property
    def has_payload(self) -> bool:
        return bool(self.payload)


__all__ = ["ModelSignerCompletion"]
