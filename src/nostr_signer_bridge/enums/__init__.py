# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Signer Bridge Enumerations Module.

Exports:
    EnumCompletionDisposition: What the correlator did with a completion
    EnumCompletionStatus: Outcome reported by the transport (OK, CANCELED, FAILED)
    EnumInflightPolicy: Behavior for a request issued while one is outstanding
    EnumSignerErrorCode: Error classification for SignerBridgeError
    EnumSignerOperation: The eight NIP-55 signer operations
"""

from nostr_signer_bridge.enums.enum_completion_disposition import (
    EnumCompletionDisposition,
)
from nostr_signer_bridge.enums.enum_completion_status import EnumCompletionStatus
from nostr_signer_bridge.enums.enum_inflight_policy import EnumInflightPolicy
from nostr_signer_bridge.enums.enum_signer_error_code import EnumSignerErrorCode
from nostr_signer_bridge.enums.enum_signer_operation import EnumSignerOperation

__all__: list[str] = [
    "EnumCompletionDisposition",
    "EnumCompletionStatus",
    "EnumInflightPolicy",
    "EnumSignerErrorCode",
    "EnumSignerOperation",
]
