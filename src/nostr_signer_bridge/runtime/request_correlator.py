# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Request correlator for one-shot external signer requests.

The transport offers no multiplexing: a request is launched with a
correlation tag and, later and on an unrelated call stack, the host reports
the outcome with the same tag. This module owns the waiter for that
outstanding request and resolves or rejects it exactly once.

Pending Map:
    Waiters are stored in a dict keyed by a per-call UUID4, not in a single
    overwritable slot. The transport still supports only one outstanding
    request, so the single-flight constraint is enforced explicitly through
    EnumInflightPolicy:

    - REJECT (default): a second registration raises SignerBusyError and the
      outstanding waiter is untouched
    - OVERWRITE: the outstanding waiter is abandoned without being resolved
      or rejected, and the new one takes its place

Completion Matching:
    - No waiter registered: the completion is dropped (UNEXPECTED)
    - Tag differs from the waiter's tag: dropped, waiter kept (MISMATCHED)
    - Otherwise the waiter is removed first, then resolved or rejected

Completion Outcomes:
    - OK with a non-empty payload: decoded for the waiter's operation;
      decode failure rejects with DecodeFailedError
    - CANCELED, FAILED, or OK without a payload: rejects with
      OperationCanceledOrFailedError

Thread Safety:
    Designed for single-threaded async use. Hosts that deliver completions
    from another thread must use complete_threadsafe().
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from uuid import UUID, uuid4

from nostr_signer_bridge.enums import (
    EnumCompletionDisposition,
    EnumCompletionStatus,
    EnumInflightPolicy,
    EnumSignerOperation,
)
from nostr_signer_bridge.errors import (
    DecodeFailedError,
    ModelSignerErrorContext,
    OperationCanceledOrFailedError,
    SignerBusyError,
)
from nostr_signer_bridge.models import ModelSignerCompletion, SignerResult
from nostr_signer_bridge.runtime.registry_operation import (
    REGISTRY_OPERATION,
    RegistryOperation,
)
from nostr_signer_bridge.runtime.result_decoder import ResultDecoder

logger = logging.getLogger(__name__)


@dataclass
class PendingCall:
    """Waiter for one outstanding async signer request.

    Exclusively owned by the RequestCorrelator from registration until it is
    resolved, rejected, discarded, or abandoned.
    """

    call_id: UUID
    operation: EnumSignerOperation
    tag: int
    future: asyncio.Future[SignerResult]
    signer: str | None = None
    request_id: str | None = None

    def error_context(self) -> ModelSignerErrorContext:
        return ModelSignerErrorContext(
            operation=self.operation,
            tag=self.tag,
            signer=self.signer,
            correlation_id=self.call_id,
        )


class RequestCorrelator:
    """Tracks the outstanding signer request and matches completions to it.

    Attributes:
        _pending: Call id to waiter. Holds at most one entry.
        _inflight_policy: Behavior when registering while a call is outstanding.
        _decoder: Decoder used on successful completions.
        _registry: Operation catalog used to look up tags.
        _loop: Loop the last waiter was registered on.
    """

    def __init__(
        self,
        decoder: ResultDecoder | None = None,
        registry: RegistryOperation | None = None,
        inflight_policy: EnumInflightPolicy = EnumInflightPolicy.REJECT,
    ) -> None:
        self._registry = registry or REGISTRY_OPERATION
        self._decoder = decoder or ResultDecoder(self._registry)
        self._inflight_policy = inflight_policy
        self._pending: dict[UUID, PendingCall] = {}
        self._loop: asyncio.AbstractEventLoop | None = None

    @property
    def inflight_policy(self) -> EnumInflightPolicy:
        return self._inflight_policy

    @property
    def has_pending(self) -> bool:
        return bool(self._pending)

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def current(self) -> PendingCall | None:
        """Return the most recently registered waiter, if any."""
        return next(reversed(self._pending.values()), None)

    def register(
        self,
        operation: EnumSignerOperation,
        *,
        signer: str | None = None,
        request_id: str | None = None,
    ) -> PendingCall:
        """Register a waiter for a request about to be submitted.

        Must be called from a running event loop; the waiter's future is
        created on it.

        Args:
            operation: Operation kind of the request.
            signer: Resolved signer identity, threaded into the result.
            request_id: Caller-supplied id, threaded into the result.

        Returns:
            The registered PendingCall.

        Raises:
            SignerBusyError: If a call is outstanding and the policy is REJECT.
        """
        tag = self._registry.tag_for(operation)
        outstanding = self.current()
        if outstanding is not None:
            if self._inflight_policy is EnumInflightPolicy.REJECT:
                raise SignerBusyError(
                    f"Cannot start '{operation.value}' while "
                    f"'{outstanding.operation.value}' is outstanding",
                    context=ModelSignerErrorContext(
                        operation=operation,
                        tag=tag,
                        signer=signer,
                    ),
                    outstanding_operation=outstanding.operation,
                    outstanding_correlation_id=outstanding.call_id,
                )
            logger.warning(
                "Abandoning outstanding signer call: operation=%s, "
                "correlation_id=%s, replaced_by=%s",
                outstanding.operation.value,
                outstanding.call_id,
                operation.value,
            )
            self._pending.clear()

        loop = asyncio.get_running_loop()
        pending = PendingCall(
            call_id=uuid4(),
            operation=operation,
            tag=tag,
            future=loop.create_future(),
            signer=signer,
            request_id=request_id,
        )
        self._loop = loop
        self._pending[pending.call_id] = pending
        logger.debug(
            "Registered signer call: operation=%s, tag=%d, correlation_id=%s",
            operation.value,
            tag,
            pending.call_id,
        )
        return pending

    def discard(self, call_id: UUID) -> bool:
        """Remove a waiter without resolving it.

        Used when submission fails, or when the caller stops waiting.

        Returns:
            True if a waiter was removed.
        """
        pending = self._pending.pop(call_id, None)
        if pending is None:
            return False
        logger.debug(
            "Discarded signer call: operation=%s, correlation_id=%s",
            pending.operation.value,
            call_id,
        )
        return True

    def complete(
        self,
        tag: int,
        completion: ModelSignerCompletion,
    ) -> EnumCompletionDisposition:
        """Match a completion to the outstanding waiter and settle it.

        Never raises for dropped completions; there is no caller left to
        notify.

        Args:
            tag: Correlation tag the host reported.
            completion: Outcome reported by the host.

        Returns:
            What was done with the completion.
        """
        pending = self.current()
        if pending is None:
            logger.warning(
                "Dropping signer completion with no pending call: tag=%d, status=%s",
                tag,
                completion.status.value,
            )
            return EnumCompletionDisposition.UNEXPECTED

        if tag != pending.tag:
            logger.warning(
                "Dropping signer completion with mismatched tag: tag=%d, "
                "expected=%d, operation=%s",
                tag,
                pending.tag,
                pending.operation.value,
            )
            return EnumCompletionDisposition.MISMATCHED

        del self._pending[pending.call_id]

        if pending.future.done():
            logger.debug(
                "Signer call already finished before completion: correlation_id=%s",
                pending.call_id,
            )
            return EnumCompletionDisposition.UNEXPECTED

        if completion.status is EnumCompletionStatus.OK and completion.has_payload:
            try:
                result = self._decoder.decode(
                    pending.operation,
                    completion.payload or {},
                    request_id=pending.request_id,
                    signer=pending.signer,
                    context=pending.error_context(),
                )
            except DecodeFailedError as e:
                pending.future.set_exception(e)
                logger.warning(
                    "Signer result could not be decoded: operation=%s, "
                    "correlation_id=%s, error=%s",
                    pending.operation.value,
                    pending.call_id,
                    e.message,
                )
                return EnumCompletionDisposition.REJECTED
            pending.future.set_result(result)
            logger.debug(
                "Resolved signer call: operation=%s, correlation_id=%s",
                pending.operation.value,
                pending.call_id,
            )
            return EnumCompletionDisposition.RESOLVED

        if completion.status is EnumCompletionStatus.OK:
            message = "No result returned from signer"
        else:
            message = "Operation canceled or failed"
        pending.future.set_exception(
            OperationCanceledOrFailedError(
                message,
                context=pending.error_context(),
                status=completion.status,
                detail=completion.detail,
            )
        )
        logger.debug(
            "Rejected signer call: operation=%s, correlation_id=%s, status=%s",
            pending.operation.value,
            pending.call_id,
            completion.status.value,
        )
        return EnumCompletionDisposition.REJECTED

    def complete_threadsafe(self, tag: int, completion: ModelSignerCompletion) -> bool:
        """Schedule complete() on the loop that registered the last waiter.

        Does not read the pending map; complete() decides on the loop thread
        whether the completion matches, and drops it otherwise.

        Returns:
            False if no waiter was ever registered (the completion is
            dropped), True if delivery was scheduled.
        """
        loop = self._loop
        if loop is None:
            logger.warning(
                "Dropping cross-thread signer completion before any call: tag=%d",
                tag,
            )
            return False
        loop.call_soon_threadsafe(self.complete, tag, completion)
        return True

    def cancel_all(self, reason: str = "Signer bridge closed") -> int:
        """Reject every outstanding waiter with OperationCanceledOrFailedError.

        Safe to call multiple times; subsequent calls are no-ops.

        Returns:
            Number of waiters that were rejected.
        """
        pending_calls = list(self._pending.values())
        self._pending.clear()
        rejected = 0
        for pending in pending_calls:
            if pending.future.done():
                continue
            pending.future.set_exception(
                OperationCanceledOrFailedError(reason, context=pending.error_context())
            )
            rejected += 1
        if rejected:
            logger.info("Failed %d outstanding signer call(s): %s", rejected, reason)
        return rejected


__all__: list[str] = [
    "PendingCall",
    "RequestCorrelator",
]
