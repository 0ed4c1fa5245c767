# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Completion status enumeration for signer callbacks."""

from enum import Enum


class EnumCompletionStatus(str, Enum):
    """Outcome reported by the transport when the external signer returns.

    Attributes:
        OK: The signer finished and (normally) returned a payload
        CANCELED: The user dismissed the signer without completing
        FAILED: The signer or host reported a failure
    """

    OK = "ok"
    CANCELED = "canceled"
    FAILED = "failed"


__all__ = ["EnumCompletionStatus"]
