# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""In-flight policy enumeration for the request correlator."""

from enum import Enum


class EnumInflightPolicy(str, Enum):
    """Behavior when a new async request is issued while one is outstanding.

    The transport only supports one outstanding request at a time.

    Attributes:
        REJECT: Refuse the new request with SignerBusyError (default)
        OVERWRITE: Abandon the outstanding waiter without resolving it
    """

    REJECT = "reject"
    OVERWRITE = "overwrite"


__all__ = ["EnumInflightPolicy"]
