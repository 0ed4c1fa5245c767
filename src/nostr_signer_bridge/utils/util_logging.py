# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Logging configuration for hosts embedding the signer bridge.

Environment Variables:
    NOSTR_SIGNER_LOG_LEVEL: DEBUG, INFO (default), WARNING, ERROR, CRITICAL
"""

from __future__ import annotations

import logging
import os
import sys

ENV_LOG_LEVEL = "NOSTR_SIGNER_LOG_LEVEL"
VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


def resolve_log_level(value: str | None) -> int:
    """Map a level name to a logging level, warning on invalid names."""
    log_level = (value or "INFO").strip().upper()
    if log_level not in VALID_LOG_LEVELS:
        print(
            f"Warning: Invalid {ENV_LOG_LEVEL} '{log_level}', using INFO. "
            f"Valid levels: {', '.join(sorted(VALID_LOG_LEVELS))}",
            file=sys.stderr,
        )
        log_level = "INFO"
    return getattr(logging, log_level, logging.INFO)


def configure_logging() -> None:
    """Configure root logging from NOSTR_SIGNER_LOG_LEVEL.

    Payload contents are never logged by this package; only operation kinds,
    tags, signer identities, and correlation ids.
    """
    logging.basicConfig(
        level=resolve_log_level(os.getenv(ENV_LOG_LEVEL)),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


__all__ = [
    "ENV_LOG_LEVEL",
    "VALID_LOG_LEVELS",
    "configure_logging",
    "resolve_log_level",
]
