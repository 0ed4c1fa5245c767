# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Default request builder producing NIP-55 intent-shaped requests.

Request Shape:
    uri:      ``nostrsigner:<content>`` (content omitted when the operation
              has none)
    package:  Target signer package
    extras:   ``type`` plus, when set, ``id``, ``current_user`` and
              ``pubkey`` (the counterparty key of encrypt/decrypt)
"""

from __future__ import annotations

from nostr_signer_bridge.enums import EnumSignerOperation
from nostr_signer_bridge.models import ModelSignerRequest, ModelSignerRequestParams

NOSTRSIGNER_SCHEME = "nostrsigner:"

_PEER_KEY_OPERATIONS = frozenset(
    {
        EnumSignerOperation.NIP04_ENCRYPT,
        EnumSignerOperation.NIP04_DECRYPT,
        EnumSignerOperation.NIP44_ENCRYPT,
        EnumSignerOperation.NIP44_DECRYPT,
    }
)


class Nip55IntentRequestBuilder:
    """Builds ModelSignerRequest objects for every operation kind."""

    def build(
        self,
        operation: EnumSignerOperation,
        params: ModelSignerRequestParams,
    ) -> ModelSignerRequest:
        if not params.signer:
            raise ValueError("params.signer must be resolved before building a request")

        extras: dict[str, str] = {"type": operation.value}
        if params.request_id is not None:
            extras["id"] = params.request_id
        if params.current_user is not None:
            extras["current_user"] = params.current_user
        if operation in _PEER_KEY_OPERATIONS and params.peer_pubkey is not None:
            extras["pubkey"] = params.peer_pubkey

        return ModelSignerRequest(
            uri=f"{NOSTRSIGNER_SCHEME}{params.content or ''}",
            operation=operation,
            package=params.signer,
            extras=extras,
        )


__all__: list[str] = [
    "NOSTRSIGNER_SCHEME",
    "Nip55IntentRequestBuilder",
]
