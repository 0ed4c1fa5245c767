# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Signer Request Parameters Model.

The literal parameter set passed into every signer operation. Which fields
are required depends on the operation kind (see RegistryOperation).
"""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field


class ModelSignerRequestParams(BaseModel):
    """Inputs for a single signer operation.

    Attributes:
        signer: Signer identity (package name). Falls back to the default
            identity when None or empty.
        content: Event JSON, plaintext, or ciphertext depending on operation
        request_id: Event id or caller correlation id threaded into results
        peer_pubkey: Recipient (encrypt) or sender (decrypt) public key
        current_user: The caller's own public key, forwarded to the signer
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    signer: str | None = Field(default=None, description="Signer identity")
    content: str | None = Field(default=None, description="Operation content")
    request_id: str | None = Field(default=None, description="Event or correlation id")
    peer_pubkey: str | None = Field(default=None, description="Counterparty public key")
    current_user: str | None = Field(default=None, description="Caller's own public key")

    def missing_fields(self, required: Iterable[str]) -> list[str]:
        """Return the required field names whose value is None, sorted."""
        return sorted(name for name in required if getattr(self, name) is None)

    def with_signer(self, signer: str) -> ModelSignerRequestParams:
        return self.model_copy(update={"signer": signer})


__all__ = ["ModelSignerRequestParams"]
