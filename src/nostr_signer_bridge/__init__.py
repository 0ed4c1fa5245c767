# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""NIP-55 external signer bridge.

This package lets an application call a fixed set of Nostr signer operations
against an external signer application that is reachable only through an
asynchronous, one-shot request/response channel.

Key Components:
    - SignerFacade: Public call surface, one coroutine per signer operation
    - DualPathInvoker: Local fast path with fallback to the async transport
    - RequestCorrelator: Tracks the in-flight waiter and matches completions
    - ResultDecoder: Decodes dynamically-typed payloads into typed results
    - RegistryOperation: Static catalog of operation tags and required inputs
"""

__all__: list[str] = []
