# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""External collaborator protocols for the signer bridge.

Exports:
    ProtocolRequestBuilder: Builds the opaque outbound request
    ProtocolSignerProvider: Signer list, default identity, local fast path
    ProtocolSignerTransport: Launches the external signer
"""

from nostr_signer_bridge.protocols.protocol_request_builder import (
    ProtocolRequestBuilder,
)
from nostr_signer_bridge.protocols.protocol_signer_provider import (
    ProtocolSignerProvider,
)
from nostr_signer_bridge.protocols.protocol_signer_transport import (
    ProtocolSignerTransport,
)

__all__: list[str] = [
    "ProtocolRequestBuilder",
    "ProtocolSignerProvider",
    "ProtocolSignerTransport",
]
