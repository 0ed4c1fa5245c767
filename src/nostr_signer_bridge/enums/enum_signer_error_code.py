# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Signer error code enumeration.

Machine-readable classification carried by every SignerBridgeError.
"""

from enum import Enum


class EnumSignerErrorCode(str, Enum):
    """Error codes for signer bridge failures."""

    MISSING_PARAMETER = "MISSING_PARAMETER"
    NO_SIGNER_CONFIGURED = "NO_SIGNER_CONFIGURED"
    DISPATCH_FAILED = "DISPATCH_FAILED"
    OPERATION_CANCELED_OR_FAILED = "OPERATION_CANCELED_OR_FAILED"
    DECODE_FAILED = "DECODE_FAILED"
    SIGNER_BUSY = "SIGNER_BUSY"
    TIMEOUT = "TIMEOUT"
    OPERATION_FAILED = "OPERATION_FAILED"


__all__ = ["EnumSignerErrorCode"]
