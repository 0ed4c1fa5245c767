# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Completion disposition enumeration.

Describes what the RequestCorrelator did with a completion event. Dropped
completions are reported through this value instead of being raised, since
there is no caller left to notify.
"""

from enum import Enum


class EnumCompletionDisposition(str, Enum):
    """What happened to a completion handed to the correlator.

    Attributes:
        RESOLVED: A waiter was matched and received a typed result
        REJECTED: A waiter was matched and received an error
        UNEXPECTED: No waiter was registered; the completion was dropped
        MISMATCHED: The tag did not match the waiter; the completion was dropped
    """

    RESOLVED = "resolved"
    REJECTED = "rejected"
    UNEXPECTED = "unexpected"
    MISMATCHED = "mismatched"


__all__ = ["EnumCompletionDisposition"]
