# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Utility functions for the signer bridge."""

from nostr_signer_bridge.utils.util_logging import configure_logging, resolve_log_level

__all__: list[str] = [
    "configure_logging",
    "resolve_log_level",
]
