# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Typed result records returned by the signer facade.

One record shape per operation kind. Records are created by the
ResultDecoder and never mutated afterwards.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelPublicKeyResult(BaseModel):
    """Result of GET_PUBLIC_KEY."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    public_key: str = Field(description="Signer public key (npub or hex)")
    package_name: str | None = Field(
        default=None,
        description="Package name of the signer that answered",
    )


class ModelSignEventResult(BaseModel):
    """Result of SIGN_EVENT."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    signature: str = Field(description="Event signature")
    id: str | None = Field(default=None, description="Event id")
    serialized_event: str | None = Field(
        default=None,
        description="Signed event JSON, when the signer returned it",
    )


class ModelTextResult(BaseModel):
    """Result of the encrypt/decrypt operations and DECRYPT_ZAP_EVENT."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    result_text: str = Field(description="Ciphertext, plaintext, or decrypted event JSON")
    id: str | None = Field(default=None, description="Caller correlation id")


class ModelRelaysResult(BaseModel):
    """Result of GET_RELAYS."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    result_json: str = Field(description="Relay list as JSON text")
    id: str | None = Field(default=None, description="Caller correlation id")


SignerResult = ModelPublicKeyResult | ModelSignEventResult | ModelTextResult | ModelRelaysResult


__all__ = [
    "ModelPublicKeyResult",
    "ModelRelaysResult",
    "ModelSignEventResult",
    "ModelTextResult",
    "SignerResult",
]
