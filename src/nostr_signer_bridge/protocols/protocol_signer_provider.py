# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol definition for the signer identity/provider source.

The provider enumerates installed signers, owns the persisted default
identity, and answers the synchronous local fast path.

Design Decisions:
    - runtime_checkable: Enables isinstance() checks for duck typing
    - Synchronous methods: the fast path must answer within the call and
      never prompt the user
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from nostr_signer_bridge.enums import EnumSignerOperation
    from nostr_signer_bridge.models import ModelSignerAppInfo, ModelSignerRequestParams


@runtime_checkable
class ProtocolSignerProvider(Protocol):
    """Protocol for the signer identity and local-answer source.

    Implementations:
        - A host bridge backed by the platform's content resolver
        - In-memory fakes for tests
    """

    def list_available_signers(self) -> list[ModelSignerAppInfo]:
        """Return metadata for every installed signer application."""
        ...

    def get_default_identity(self) -> str | None:
        """Return the persisted default signer identity, if any."""
        ...

    def set_default_identity(self, identifier: str) -> None:
        """Persist ``identifier`` as the default signer identity."""
        ...

    def try_local(
        self,
        operation: EnumSignerOperation,
        params: ModelSignerRequestParams,
    ) -> Mapping[str, object] | None:
        """Attempt to answer the operation without user interaction.

        Args:
            operation: Operation kind being invoked.
            params: Call parameters with the signer identity already resolved.

        Returns:
            A raw result bundle, or None (or an empty mapping) when no local
            answer is available and the async path must be used.
        """
        ...


__all__: list[str] = ["ProtocolSignerProvider"]
