# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Signer bridge runtime: correlation and decoding engine.

Exports:
    DualPathInvoker: Fast path with async transport fallback
    InvocationOutcome: Resolved-or-deferred result of an invocation
    Nip55IntentRequestBuilder: Default NIP-55 intent request builder
    OperationSpec: Static description of one operation kind
    PendingCall: Waiter for the outstanding async request
    REGISTRY_OPERATION: The process-wide operation catalog
    RegistryOperation: Operation catalog keyed by kind and tag
    RequestCorrelator: Matches completions to the outstanding waiter
    ResultDecoder: Decodes raw payloads into typed results
    SignerFacade: Public call surface
"""

from nostr_signer_bridge.runtime.dual_path_invoker import (
    DualPathInvoker,
    InvocationOutcome,
)
from nostr_signer_bridge.runtime.nip55_intent_request_builder import (
    Nip55IntentRequestBuilder,
)
from nostr_signer_bridge.runtime.registry_operation import (
    REGISTRY_OPERATION,
    OperationSpec,
    RegistryOperation,
)
from nostr_signer_bridge.runtime.request_correlator import (
    PendingCall,
    RequestCorrelator,
)
from nostr_signer_bridge.runtime.result_decoder import ResultDecoder
from nostr_signer_bridge.runtime.signer_facade import SignerFacade

__all__: list[str] = [
    "DualPathInvoker",
    "InvocationOutcome",
    "Nip55IntentRequestBuilder",
    "OperationSpec",
    "PendingCall",
    "REGISTRY_OPERATION",
    "RegistryOperation",
    "RequestCorrelator",
    "ResultDecoder",
    "SignerFacade",
]
