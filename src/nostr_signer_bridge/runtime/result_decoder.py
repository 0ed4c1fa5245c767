# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Result decoder for signer payloads.

Converts the dynamically-typed key/value bundle returned by an external
signer into the typed result record of an operation kind.

Field Rules:
    - Each result field reads an ordered list of payload keys; the first key
      holding a non-null value wins
    - String values pass through verbatim; bool/int/float values are
      stringified
    - A mandatory field that is absent or null is a decode failure
    - An optional field that is absent or null takes the caller-supplied
      fallback (request id, signer identity) or None
    - Unknown payload keys are ignored

Key Aliases:
    Signers differ in where they put the answer: older signers return the
    public key and encryption results under ``signature``, current ones under
    ``result``. The alias lists below accept both.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from pydantic import BaseModel, ValidationError

from nostr_signer_bridge.enums import EnumSignerOperation
from nostr_signer_bridge.errors import DecodeFailedError, ModelSignerErrorContext
from nostr_signer_bridge.models import ModelRawResultPayload, SignerResult
from nostr_signer_bridge.runtime.registry_operation import (
    REGISTRY_OPERATION,
    RegistryOperation,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _FieldSpec:
    name: str
    keys: tuple[str, ...]
    mandatory: bool = False
    fallback: str | None = None


_PUBLIC_KEY_FIELDS = (
    _FieldSpec("public_key", ("npub", "publicKey", "result", "signature"), mandatory=True),
    _FieldSpec("package_name", ("package", "packageName"), fallback="signer"),
)
_SIGN_EVENT_FIELDS = (
    _FieldSpec("signature", ("signature", "result"), mandatory=True),
    _FieldSpec("id", ("id",), fallback="request_id"),
    _FieldSpec("serialized_event", ("event",)),
)
_TEXT_FIELDS = (
    _FieldSpec("result_text", ("result", "signature"), mandatory=True),
    _FieldSpec("id", ("id",), fallback="request_id"),
)
_RELAYS_FIELDS = (
    _FieldSpec("result_json", ("result", "signature"), mandatory=True),
    _FieldSpec("id", ("id",), fallback="request_id"),
)

_FIELDS_BY_OPERATION: dict[EnumSignerOperation, tuple[_FieldSpec, ...]] = {
    EnumSignerOperation.GET_PUBLIC_KEY: _PUBLIC_KEY_FIELDS,
    EnumSignerOperation.SIGN_EVENT: _SIGN_EVENT_FIELDS,
    EnumSignerOperation.NIP04_ENCRYPT: _TEXT_FIELDS,
    EnumSignerOperation.NIP04_DECRYPT: _TEXT_FIELDS,
    EnumSignerOperation.NIP44_ENCRYPT: _TEXT_FIELDS,
    EnumSignerOperation.NIP44_DECRYPT: _TEXT_FIELDS,
    EnumSignerOperation.DECRYPT_ZAP_EVENT: _TEXT_FIELDS,
    EnumSignerOperation.GET_RELAYS: _RELAYS_FIELDS,
}


class ResultDecoder:
    """Decodes raw signer payloads into typed result records.

    Stateless; a single instance can be shared by every call.

    Example:
        >>> decoder = ResultDecoder()
        >>> result = decoder.decode(
        ...     EnumSignerOperation.SIGN_EVENT,
        ...     {"signature": "deadbeef", "event": "{}"},
        ...     request_id="event123",
        ... )
        >>> result.id
        'event123'
    """

    def __init__(self, registry: RegistryOperation | None = None) -> None:
        self._registry = registry or REGISTRY_OPERATION

    def decode(
        self,
        operation: EnumSignerOperation,
        payload: ModelRawResultPayload | Mapping[str, object],
        *,
        request_id: str | None = None,
        signer: str | None = None,
        context: ModelSignerErrorContext | None = None,
    ) -> SignerResult:
        """Decode ``payload`` into the result record of ``operation``.

        Args:
            operation: Operation kind the payload answers.
            payload: Raw bundle or an already-lifted ModelRawResultPayload.
            request_id: Caller-supplied id used when the payload has none.
            signer: Signer identity used when the payload names no package.
            context: Error context to attach to a DecodeFailedError.

        Returns:
            The typed result record.

        Raises:
            DecodeFailedError: If the payload is not a mapping, or a
                mandatory field is absent or null.
        """
        error_context = context or ModelSignerErrorContext(operation=operation, signer=signer)
        raw = self._lift(payload, error_context)
        fallbacks = {"request_id": request_id, "signer": signer}

        values: dict[str, str | None] = {}
        for spec in _FIELDS_BY_OPERATION[operation]:
            values[spec.name] = self._decode_field(raw, spec, fallbacks, error_context)

        result_model: type[BaseModel] = self._registry.result_model(operation)
        try:
            result = result_model(**values)
        except ValidationError as e:
            raise DecodeFailedError(
                f"Result payload for '{operation.value}' does not fit its record",
                context=error_context,
            ) from e

        logger.debug(
            "Decoded %s result: payload_keys=%s",
            operation.value,
            sorted(raw.fields),
        )
        return result  # type: ignore[return-value]

    @staticmethod
    def _lift(
        payload: ModelRawResultPayload | Mapping[str, object],
        context: ModelSignerErrorContext,
    ) -> ModelRawResultPayload:
        if isinstance(payload, ModelRawResultPayload):
            return payload
        if not isinstance(payload, Mapping):
            raise DecodeFailedError(
                f"Result payload must be a mapping, got {type(payload).__name__}",
                context=context,
            )
        return ModelRawResultPayload.from_mapping(payload)

    @staticmethod
    def _decode_field(
        raw: ModelRawResultPayload,
        spec: _FieldSpec,
        fallbacks: Mapping[str, str | None],
        context: ModelSignerErrorContext,
    ) -> str | None:
        value = raw.first(*spec.keys)
        text = value.as_text() if value is not None else None
        if text is not None:
            return text
        if spec.mandatory:
            raise DecodeFailedError(
                f"Result payload has no value for '{spec.name}'",
                context=context,
                field_name=spec.name,
                accepted_keys=list(spec.keys),
            )
        if spec.fallback is not None:
            return fallbacks.get(spec.fallback)
        return None


__all__: list[str] = ["ResultDecoder"]
