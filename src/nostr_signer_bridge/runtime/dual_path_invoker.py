# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Dual-path invoker: local fast path with async transport fallback.

Invocation Steps:
    1. Validate the operation's required parameters (MissingParameterError)
    2. Resolve the signer identity: explicit parameter, then the provider's
       default identity, then the configured default (NoSignerConfiguredError)
    3. Ask the provider for a local answer; a non-empty answer is decoded and
       returned immediately without touching the correlator
    4. Otherwise register a waiter (SignerBusyError under REJECT), then build
       the request and submit it to the transport; the outcome is deferred
    5. If submission raises, the waiter is discarded and DispatchFailedError
       is raised; no completion is expected
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from uuid import UUID

from nostr_signer_bridge.enums import EnumSignerOperation
from nostr_signer_bridge.errors import (
    DispatchFailedError,
    MissingParameterError,
    ModelSignerErrorContext,
    NoSignerConfiguredError,
)
from nostr_signer_bridge.models import ModelSignerRequestParams, SignerResult
from nostr_signer_bridge.protocols import (
    ProtocolRequestBuilder,
    ProtocolSignerProvider,
    ProtocolSignerTransport,
)
from nostr_signer_bridge.runtime.registry_operation import (
    REGISTRY_OPERATION,
    RegistryOperation,
)
from nostr_signer_bridge.runtime.request_correlator import RequestCorrelator
from nostr_signer_bridge.runtime.result_decoder import ResultDecoder

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InvocationOutcome:
    """Result of DualPathInvoker.invoke().

    Exactly one of ``result`` (fast path) and ``future`` (deferred to the
    transport) is set.
    """

    operation: EnumSignerOperation
    signer: str
    result: SignerResult | None = None
    future: asyncio.Future[SignerResult] | None = None
    call_id: UUID | None = None

    @property
    def is_deferred(self) -> bool:
        return self.future is not None


class DualPathInvoker:
    """Runs a signer operation through the fast path or the transport."""

    def __init__(
        self,
        provider: ProtocolSignerProvider,
        request_builder: ProtocolRequestBuilder,
        transport: ProtocolSignerTransport,
        correlator: RequestCorrelator,
        decoder: ResultDecoder | None = None,
        registry: RegistryOperation | None = None,
        default_signer: str | None = None,
    ) -> None:
        self._provider = provider
        self._request_builder = request_builder
        self._transport = transport
        self._correlator = correlator
        self._registry = registry or REGISTRY_OPERATION
        self._decoder = decoder or ResultDecoder(self._registry)
        self._default_signer = default_signer

    def resolve_signer(self, explicit: str | None) -> str | None:
        """Pick the signer identity for a call, or None if none is set."""
        if explicit:
            return explicit
        return self._provider.get_default_identity() or self._default_signer or None

    def invoke(
        self,
        operation: EnumSignerOperation,
        params: ModelSignerRequestParams,
    ) -> InvocationOutcome:
        """Run ``operation`` with ``params``.

        Must be called from a running event loop when the slow path may be
        taken.

        Raises:
            MissingParameterError: A required parameter is None.
            NoSignerConfiguredError: No signer identity is available.
            SignerBusyError: Another call is outstanding (REJECT policy).
            DispatchFailedError: The transport refused the request.
            DecodeFailedError: The fast-path answer could not be decoded.
        """
        missing = params.missing_fields(self._registry.required_fields(operation))
        if missing:
            raise MissingParameterError(
                f"Missing required parameter(s) for '{operation.value}': "
                f"{', '.join(missing)}",
                context=ModelSignerErrorContext.with_correlation(
                    operation=operation, signer=params.signer
                ),
                missing=missing,
            )

        signer = self.resolve_signer(params.signer)
        if signer is None:
            raise NoSignerConfiguredError(
                "Signer package name not set. Call set_default_signer first.",
                context=ModelSignerErrorContext.with_correlation(operation=operation),
            )
        params = params.with_signer(signer)

        local_payload = self._provider.try_local(operation, params)
        if local_payload:
            result = self._decoder.decode(
                operation,
                local_payload,
                request_id=params.request_id,
                signer=signer,
            )
            logger.debug(
                "Signer operation answered locally: operation=%s, signer=%s",
                operation.value,
                signer,
            )
            return InvocationOutcome(operation=operation, signer=signer, result=result)

        pending = self._correlator.register(
            operation,
            signer=signer,
            request_id=params.request_id,
        )
        try:
            request = self._request_builder.build(operation, params)
        except Exception:
            self._correlator.discard(pending.call_id)
            pending.future.cancel()
            raise
        try:
            self._transport.submit(request, pending.tag)
        except Exception as e:
            self._correlator.discard(pending.call_id)
            pending.future.cancel()
            raise DispatchFailedError(
                f"Failed to start signer: {type(e).__name__}",
                context=pending.error_context(),
            ) from e

        logger.debug(
            "Signer operation submitted: operation=%s, signer=%s, correlation_id=%s",
            operation.value,
            signer,
            pending.call_id,
        )
        return InvocationOutcome(
            operation=operation,
            signer=signer,
            future=pending.future,
            call_id=pending.call_id,
        )


__all__: list[str] = [
    "DualPathInvoker",
    "InvocationOutcome",
]
