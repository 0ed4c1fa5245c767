# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Signer facade - public call surface of the signer bridge.

One coroutine per signer operation. Every call resolves exactly once or
raises exactly once, whether it was answered through the local fast path or
through the external signer.

Architecture:
    SignerFacade composes:
    1. DualPathInvoker for parameter validation, identity resolution, the
       fast path, and submission
    2. RequestCorrelator for the outstanding waiter
    3. ResultDecoder for turning payloads into typed records

    The host delivers the signer's answer through handle_completion() (or
    handle_completion_threadsafe() from a non-loop thread).

Error Handling:
    - MissingParameterError, NoSignerConfiguredError, SignerBusyError and
      DispatchFailedError are raised before the call suspends
    - OperationCanceledOrFailedError and DecodeFailedError are raised when
      the completion arrives, and immediately for any call made after close()
    - SignerTimeoutError is raised only when timeout_seconds is configured
    - Nothing is retried; callers may simply call again

Example:
    ```python
    facade = SignerFacade(
        provider=host_provider,
        transport=host_transport,
        config=ModelSignerBridgeConfig.from_env(),
    )
    facade.set_default_signer("com.greenart7c3.nostrsigner")

    # In the host's result callback:
    facade.handle_completion(request_code, ModelSignerCompletion.success(extras))

    signed = await facade.sign_event(event_json, event_id, current_user=npub)
    ```
"""

from __future__ import annotations

import asyncio
import logging
from typing import cast

from nostr_signer_bridge.enums import EnumCompletionDisposition, EnumSignerOperation
from nostr_signer_bridge.errors import (
    MissingParameterError,
    ModelSignerErrorContext,
    OperationCanceledOrFailedError,
    SignerTimeoutError,
)
from nostr_signer_bridge.models import (
    ModelPublicKeyResult,
    ModelRelaysResult,
    ModelSignerAppInfo,
    ModelSignerBridgeConfig,
    ModelSignerCompletion,
    ModelSignerRequestParams,
    ModelSignEventResult,
    ModelTextResult,
    SignerResult,
)
from nostr_signer_bridge.protocols import (
    ProtocolRequestBuilder,
    ProtocolSignerProvider,
    ProtocolSignerTransport,
)
from nostr_signer_bridge.runtime.dual_path_invoker import DualPathInvoker
from nostr_signer_bridge.runtime.nip55_intent_request_builder import (
    Nip55IntentRequestBuilder,
)
from nostr_signer_bridge.runtime.registry_operation import (
    REGISTRY_OPERATION,
    RegistryOperation,
)
from nostr_signer_bridge.runtime.request_correlator import RequestCorrelator
from nostr_signer_bridge.runtime.result_decoder import ResultDecoder

logger = logging.getLogger(__name__)


class SignerFacade:
    """Public entry point for NIP-55 signer operations.

    Attributes:
        _provider: Signer list, default identity, and local fast path
        _config: Bridge configuration
        _correlator: Owner of the outstanding waiter
        _invoker: Fast path / transport dispatcher
        _closed: Set once close() has run
    """

    def __init__(
        self,
        provider: ProtocolSignerProvider,
        transport: ProtocolSignerTransport,
        request_builder: ProtocolRequestBuilder | None = None,
        config: ModelSignerBridgeConfig | None = None,
        registry: RegistryOperation | None = None,
    ) -> None:
        self._provider = provider
        self._config = config or ModelSignerBridgeConfig()
        self._registry = registry or REGISTRY_OPERATION
        decoder = ResultDecoder(self._registry)
        self._correlator = RequestCorrelator(
            decoder=decoder,
            registry=self._registry,
            inflight_policy=self._config.inflight_policy,
        )
        self._invoker = DualPathInvoker(
            provider=provider,
            request_builder=request_builder or Nip55IntentRequestBuilder(),
            transport=transport,
            correlator=self._correlator,
            decoder=decoder,
            registry=self._registry,
            default_signer=self._config.default_signer,
        )
        self._closed = False

        logger.debug(
            "SignerFacade initialized: inflight_policy=%s, timeout_seconds=%s, "
            "default_signer=%s",
            self._config.inflight_policy.value,
            self._config.timeout_seconds,
            self._config.default_signer,
        )

    @property
    def correlator(self) -> RequestCorrelator:
        return self._correlator

    @property
    def config(self) -> ModelSignerBridgeConfig:
        return self._config

    # -------------------------------------------------------------------------
    # Signer selection
    # -------------------------------------------------------------------------

    def list_signers(self) -> list[ModelSignerAppInfo]:
        """Return the signer applications installed on the host."""
        return list(self._provider.list_available_signers())

    def is_signer_installed(self, identifier: str) -> bool:
        return any(app.package_name == identifier for app in self.list_signers())

    def set_default_signer(self, identifier: str | None) -> None:
        """Set the signer identity used when a call names none.

        Raises:
            MissingParameterError: If ``identifier`` is None or empty.
        """
        if not identifier:
            raise MissingParameterError(
                "Missing or empty signer identifier",
                missing=["signer"],
            )
        self._provider.set_default_identity(identifier)
        logger.info("Default signer set: signer=%s", identifier)

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    async def get_public_key(self, signer: str | None = None) -> ModelPublicKeyResult:
        result = await self._run(
            EnumSignerOperation.GET_PUBLIC_KEY,
            ModelSignerRequestParams(signer=signer),
        )
        return cast(ModelPublicKeyResult, result)

    async def sign_event(
        self,
        event_json: str | None,
        event_id: str | None,
        current_user: str | None = None,
        signer: str | None = None,
    ) -> ModelSignEventResult:
        """Sign a serialized event.

        The caller's ``event_id`` is returned as ``id`` when the signer's
        answer carries none.
        """
        result = await self._run(
            EnumSignerOperation.SIGN_EVENT,
            ModelSignerRequestParams(
                signer=signer,
                content=event_json,
                request_id=event_id,
                current_user=current_user,
            ),
        )
        return cast(ModelSignEventResult, result)

    async def nip04_encrypt(
        self,
        plaintext: str | None,
        request_id: str | None,
        peer_pubkey: str | None,
        current_user: str | None = None,
        signer: str | None = None,
    ) -> ModelTextResult:
        return await self._run_text(
            EnumSignerOperation.NIP04_ENCRYPT,
            plaintext,
            request_id,
            peer_pubkey,
            current_user,
            signer,
        )

    async def nip04_decrypt(
        self,
        ciphertext: str | None,
        request_id: str | None,
        peer_pubkey: str | None,
        current_user: str | None = None,
        signer: str | None = None,
    ) -> ModelTextResult:
        return await self._run_text(
            EnumSignerOperation.NIP04_DECRYPT,
            ciphertext,
            request_id,
            peer_pubkey,
            current_user,
            signer,
        )

    async def nip44_encrypt(
        self,
        plaintext: str | None,
        request_id: str | None,
        peer_pubkey: str | None,
        current_user: str | None = None,
        signer: str | None = None,
    ) -> ModelTextResult:
        return await self._run_text(
            EnumSignerOperation.NIP44_ENCRYPT,
            plaintext,
            request_id,
            peer_pubkey,
            current_user,
            signer,
        )

    async def nip44_decrypt(
        self,
        ciphertext: str | None,
        request_id: str | None,
        peer_pubkey: str | None,
        current_user: str | None = None,
        signer: str | None = None,
    ) -> ModelTextResult:
        return await self._run_text(
            EnumSignerOperation.NIP44_DECRYPT,
            ciphertext,
            request_id,
            peer_pubkey,
            current_user,
            signer,
        )

    async def decrypt_zap_event(
        self,
        event_json: str | None,
        request_id: str | None,
        current_user: str | None = None,
        signer: str | None = None,
    ) -> ModelTextResult:
        result = await self._run(
            EnumSignerOperation.DECRYPT_ZAP_EVENT,
            ModelSignerRequestParams(
                signer=signer,
                content=event_json,
                request_id=request_id,
                current_user=current_user,
            ),
        )
        return cast(ModelTextResult, result)

    async def get_relays(
        self,
        request_id: str | None,
        current_user: str | None = None,
        signer: str | None = None,
    ) -> ModelRelaysResult:
        result = await self._run(
            EnumSignerOperation.GET_RELAYS,
            ModelSignerRequestParams(
                signer=signer,
                request_id=request_id,
                current_user=current_user,
            ),
        )
        return cast(ModelRelaysResult, result)

    # -------------------------------------------------------------------------
    # Host callbacks
    # -------------------------------------------------------------------------

    def handle_completion(
        self,
        tag: int,
        completion: ModelSignerCompletion,
    ) -> EnumCompletionDisposition:
        """Deliver the external signer's answer. Call from the loop thread."""
        return self._correlator.complete(tag, completion)

    def handle_completion_threadsafe(
        self,
        tag: int,
        completion: ModelSignerCompletion,
    ) -> bool:
        """Deliver the external signer's answer from a non-loop thread."""
        return self._correlator.complete_threadsafe(tag, completion)

    async def close(self) -> None:
        """Fail any outstanding call and refuse new ones. Safe to call twice."""
        if self._closed:
            return
        self._closed = True
        self._correlator.cancel_all("Signer bridge closed")

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    async def _run_text(
        self,
        operation: EnumSignerOperation,
        content: str | None,
        request_id: str | None,
        peer_pubkey: str | None,
        current_user: str | None,
        signer: str | None,
    ) -> ModelTextResult:
        result = await self._run(
            operation,
            ModelSignerRequestParams(
                signer=signer,
                content=content,
                request_id=request_id,
                peer_pubkey=peer_pubkey,
                current_user=current_user,
            ),
        )
        return cast(ModelTextResult, result)

    async def _run(
        self,
        operation: EnumSignerOperation,
        params: ModelSignerRequestParams,
    ) -> SignerResult:
        if self._closed:
            raise OperationCanceledOrFailedError(
                "Signer bridge closed",
                context=ModelSignerErrorContext.with_correlation(
                    operation=operation,
                    tag=self._registry.tag_for(operation),
                ),
            )
        outcome = self._invoker.invoke(operation, params)
        if outcome.future is None:
            return cast(SignerResult, outcome.result)

        timeout = self._config.timeout_seconds
        try:
            if timeout is None:
                return await outcome.future
            return await asyncio.wait_for(outcome.future, timeout=timeout)
        except TimeoutError:
            raise SignerTimeoutError(
                f"No answer from signer after {timeout}s",
                context=ModelSignerErrorContext(
                    operation=operation,
                    tag=self._registry.tag_for(operation),
                    signer=outcome.signer,
                    correlation_id=outcome.call_id,
                ),
                timeout_seconds=timeout,
            ) from None
        finally:
            # Waiter is gone on normal settlement; this covers timeout and
            # caller cancellation.
            if outcome.call_id is not None:
                self._correlator.discard(outcome.call_id)


__all__: list[str] = ["SignerFacade"]
