# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Outbound NIP-55 signer request model.

Produced by Nip55IntentRequestBuilder and handed to the transport as an
opaque object. Custom request builders may produce any other shape.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from nostr_signer_bridge.enums import EnumSignerOperation


class ModelSignerRequest(BaseModel):
    """A NIP-55 intent-style request.

    Attributes:
        uri: ``nostrsigner:`` URI carrying the operation content
        operation: Operation kind, also sent as the ``type`` extra
        package: Signer package the request is addressed to
        extras: Remaining string extras (id, current_user, pubkey, ...)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    uri: str = Field(description="nostrsigner: URI")
    operation: EnumSignerOperation = Field(description="Operation kind")
    package: str = Field(min_length=1, description="Target signer package")
    extras: dict[str, str] = Field(default_factory=dict, description="Intent extras")


__all__ = ["ModelSignerRequest"]
