# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol definition for outbound request construction."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from nostr_signer_bridge.enums import EnumSignerOperation
    from nostr_signer_bridge.models import ModelSignerRequestParams


@runtime_checkable
class ProtocolRequestBuilder(Protocol):
    """Builds the opaque outbound request for one operation.

    The returned object is handed to the transport unchanged; the core never
    inspects it.
    """

    def build(
        self,
        operation: EnumSignerOperation,
        params: ModelSignerRequestParams,
    ) -> object:
        """Build the request for ``operation`` from the call parameters."""
        ...


__all__: list[str] = ["ProtocolRequestBuilder"]
