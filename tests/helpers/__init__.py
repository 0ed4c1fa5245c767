# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Test helpers for nostr_signer_bridge tests.

Available Utilities:
    Signer Fakes:
        - InMemorySignerProvider: Scripted provider with local answers
        - RecordingTransport: Records submissions, optionally refuses them
        - RecordingRequestBuilder: Records build() calls
        - TransportRefusedError: Raised by a refusing RecordingTransport

    Log Helpers:
        - filter_module_warnings: Filter warning records from a module
        - get_warning_messages: Extract warning messages from log records
"""

from tests.helpers.log_helpers import filter_module_warnings, get_warning_messages
from tests.helpers.signer_fakes import (
    InMemorySignerProvider,
    RecordingRequestBuilder,
    RecordingTransport,
    TransportRefusedError,
)

__all__ = [
    "InMemorySignerProvider",
    "RecordingRequestBuilder",
    "RecordingTransport",
    "TransportRefusedError",
    "filter_module_warnings",
    "get_warning_messages",
]
