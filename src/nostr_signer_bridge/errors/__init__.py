# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Signer Bridge Errors Module.

Exports:
    ModelSignerErrorContext: Configuration model for bundled error context
    SignerBridgeError: Base error class
    MissingParameterError: Required input absent
    NoSignerConfiguredError: No signer identity available
    DispatchFailedError: Transport rejected the submission
    OperationCanceledOrFailedError: Signer canceled, failed, or returned nothing
    DecodeFailedError: Result payload malformed or missing a mandatory field
    SignerBusyError: Request issued while another one is outstanding
    SignerTimeoutError: Configured timeout elapsed

Correlation ID Assignment:
    Errors raised on the async path carry the pending call's correlation_id
    (a UUID4 generated at registration). Errors raised before registration
    carry none.

    Example::

        from nostr_signer_bridge.errors import (
            DecodeFailedError,
            ModelSignerErrorContext,
        )

        context = ModelSignerErrorContext(
            operation=pending.operation,
            tag=pending.tag,
            signer=pending.signer,
            correlation_id=pending.call_id,
        )
        raise DecodeFailedError("Missing signature", context=context)
"""

from nostr_signer_bridge.errors.model_signer_error_context import (
    ModelSignerErrorContext,
)
from nostr_signer_bridge.errors.signer_errors import (
    DecodeFailedError,
    DispatchFailedError,
    MissingParameterError,
    NoSignerConfiguredError,
    OperationCanceledOrFailedError,
    SignerBridgeError,
    SignerBusyError,
    SignerTimeoutError,
)

__all__: list[str] = [
    # Configuration model
    "ModelSignerErrorContext",
    # Error classes
    "SignerBridgeError",
    "MissingParameterError",
    "NoSignerConfiguredError",
    "DispatchFailedError",
    "OperationCanceledOrFailedError",
    "DecodeFailedError",
    "SignerBusyError",
    "SignerTimeoutError",
]
