# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for ResultDecoder.

Tests validate:
- Verbatim pass-through of string fields for every operation kind
- Stringification of bool/int/float values
- Mandatory fields: absent or null is a DecodeFailedError
- Optional fields: absent falls back to caller values or None
- Key aliases (result vs signature, npub vs publicKey)
- Unknown fields are ignored; non-mapping payloads fail
"""

from __future__ import annotations

import pytest

from nostr_signer_bridge.enums import EnumSignerErrorCode, EnumSignerOperation
from nostr_signer_bridge.errors import DecodeFailedError, ModelSignerErrorContext
from nostr_signer_bridge.models import (
    ModelPublicKeyResult,
    ModelRawResultPayload,
    ModelRelaysResult,
    ModelSignEventResult,
    ModelTextResult,
)
from nostr_signer_bridge.runtime.result_decoder import ResultDecoder

TEXT_OPERATIONS = [
    EnumSignerOperation.NIP04_ENCRYPT,
    EnumSignerOperation.NIP04_DECRYPT,
    EnumSignerOperation.NIP44_ENCRYPT,
    EnumSignerOperation.NIP44_DECRYPT,
    EnumSignerOperation.DECRYPT_ZAP_EVENT,
]


@pytest.fixture
def decoder() -> ResultDecoder:
    return ResultDecoder()


class TestWellFormedPayloads:
    """Payloads that satisfy the mandatory shape decode verbatim."""

    def test_public_key(self, decoder: ResultDecoder) -> None:
        result = decoder.decode(
            EnumSignerOperation.GET_PUBLIC_KEY,
            {"publicKey": "npub1abc", "packageName": "app.signerA"},
        )
        assert result == ModelPublicKeyResult(public_key="npub1abc", package_name="app.signerA")

    def test_public_key_from_npub_and_package_keys(self, decoder: ResultDecoder) -> None:
        result = decoder.decode(
            EnumSignerOperation.GET_PUBLIC_KEY,
            {"npub": "npub1xyz", "package": "com.example.signer"},
        )
        assert isinstance(result, ModelPublicKeyResult)
        assert result.public_key == "npub1xyz"
        assert result.package_name == "com.example.signer"

    def test_public_key_package_falls_back_to_signer(self, decoder: ResultDecoder) -> None:
        result = decoder.decode(
            EnumSignerOperation.GET_PUBLIC_KEY,
            {"result": "npub1abc"},
            signer="app.signerA",
        )
        assert isinstance(result, ModelPublicKeyResult)
        assert result.package_name == "app.signerA"

    def test_sign_event(self, decoder: ResultDecoder) -> None:
        result = decoder.decode(
            EnumSignerOperation.SIGN_EVENT,
            {"signature": "deadbeef", "id": "evt-1", "event": '{"kind":1}'},
            request_id="caller-id",
        )
        assert result == ModelSignEventResult(
            signature="deadbeef", id="evt-1", serialized_event='{"kind":1}'
        )

    def test_sign_event_threads_caller_id(self, decoder: ResultDecoder) -> None:
        result = decoder.decode(
            EnumSignerOperation.SIGN_EVENT,
            {"signature": "deadbeef", "event": "{...}"},
            request_id="caller-id",
        )
        assert isinstance(result, ModelSignEventResult)
        assert result.id == "caller-id"
        assert result.serialized_event == "{...}"

    def test_sign_event_without_event_is_null(self, decoder: ResultDecoder) -> None:
        result = decoder.decode(EnumSignerOperation.SIGN_EVENT, {"signature": "deadbeef"})
        assert isinstance(result, ModelSignEventResult)
        assert result.serialized_event is None
        assert result.id is None

    @pytest.mark.parametrize("operation", TEXT_OPERATIONS)
    def test_text_operations(
        self, decoder: ResultDecoder, operation: EnumSignerOperation
    ) -> None:
        result = decoder.decode(operation, {"result": "  verbatim text \n", "id": "x1"})
        assert result == ModelTextResult(result_text="  verbatim text \n", id="x1")

    @pytest.mark.parametrize("operation", TEXT_OPERATIONS)
    def test_text_operations_accept_signature_key(
        self, decoder: ResultDecoder, operation: EnumSignerOperation
    ) -> None:
        result = decoder.decode(operation, {"signature": "legacy"}, request_id="c1")
        assert result == ModelTextResult(result_text="legacy", id="c1")

    def test_relays(self, decoder: ResultDecoder) -> None:
        relays = '{"wss://relay.damus.io":{"read":true,"write":true}}'
        result = decoder.decode(
            EnumSignerOperation.GET_RELAYS, {"result": relays}, request_id="r1"
        )
        assert result == ModelRelaysResult(result_json=relays, id="r1")

    def test_result_preferred_over_signature(self, decoder: ResultDecoder) -> None:
        result = decoder.decode(
            EnumSignerOperation.NIP44_ENCRYPT,
            {"result": "new", "signature": "old"},
        )
        assert isinstance(result, ModelTextResult)
        assert result.result_text == "new"

    def test_unknown_fields_ignored(self, decoder: ResultDecoder) -> None:
        result = decoder.decode(
            EnumSignerOperation.NIP04_DECRYPT,
            {"result": "plain", "rejected": False, "extra": 3},
        )
        assert isinstance(result, ModelTextResult)
        assert result.result_text == "plain"

    def test_accepts_lifted_payload(self, decoder: ResultDecoder) -> None:
        payload = ModelRawResultPayload.from_mapping({"result": "x"})
        result = decoder.decode(EnumSignerOperation.GET_RELAYS, payload)
        assert isinstance(result, ModelRelaysResult)
        assert result.result_json == "x"


class TestValueCoercion:
    """Non-string values are stringified where text is expected."""

    def test_bool(self, decoder: ResultDecoder) -> None:
        result = decoder.decode(EnumSignerOperation.NIP04_ENCRYPT, {"result": True})
        assert isinstance(result, ModelTextResult)
        assert result.result_text == "true"

    def test_int_id(self, decoder: ResultDecoder) -> None:
        result = decoder.decode(EnumSignerOperation.NIP04_ENCRYPT, {"result": "c", "id": 7})
        assert isinstance(result, ModelTextResult)
        assert result.id == "7"

    def test_float(self, decoder: ResultDecoder) -> None:
        result = decoder.decode(EnumSignerOperation.GET_RELAYS, {"result": 1.5})
        assert isinstance(result, ModelRelaysResult)
        assert result.result_json == "1.5"

    def test_null_falls_through_to_next_alias(self, decoder: ResultDecoder) -> None:
        result = decoder.decode(
            EnumSignerOperation.NIP44_DECRYPT, {"result": None, "signature": "s"}
        )
        assert isinstance(result, ModelTextResult)
        assert result.result_text == "s"


class TestDecodeFailures:
    """Malformed payloads and missing mandatory fields."""

    def test_sign_event_without_signature(self, decoder: ResultDecoder) -> None:
        with pytest.raises(DecodeFailedError) as exc_info:
            decoder.decode(EnumSignerOperation.SIGN_EVENT, {"event": "{}", "id": "e"})
        assert exc_info.value.error_code is EnumSignerErrorCode.DECODE_FAILED
        assert exc_info.value.extra_context["field_name"] == "signature"

    def test_public_key_null(self, decoder: ResultDecoder) -> None:
        with pytest.raises(DecodeFailedError, match="public_key"):
            decoder.decode(EnumSignerOperation.GET_PUBLIC_KEY, {"npub": None})

    @pytest.mark.parametrize("operation", TEXT_OPERATIONS)
    def test_text_without_result(
        self, decoder: ResultDecoder, operation: EnumSignerOperation
    ) -> None:
        with pytest.raises(DecodeFailedError, match="result_text"):
            decoder.decode(operation, {"id": "only-id"})

    def test_relays_without_result(self, decoder: ResultDecoder) -> None:
        with pytest.raises(DecodeFailedError, match="result_json"):
            decoder.decode(EnumSignerOperation.GET_RELAYS, {"id": "r"})

    def test_non_mapping_payload(self, decoder: ResultDecoder) -> None:
        with pytest.raises(DecodeFailedError, match="must be a mapping"):
            decoder.decode(EnumSignerOperation.GET_RELAYS, ["result"])  # type: ignore[arg-type]

    def test_error_carries_supplied_context(self, decoder: ResultDecoder) -> None:
        context = ModelSignerErrorContext(
            operation=EnumSignerOperation.SIGN_EVENT,
            tag=1002,
            signer="app.signerA",
        )
        with pytest.raises(DecodeFailedError) as exc_info:
            decoder.decode(EnumSignerOperation.SIGN_EVENT, {}, context=context)
        assert exc_info.value.context is context
        assert exc_info.value.extra_context["tag"] == 1002

    def test_payload_values_not_in_message(self, decoder: ResultDecoder) -> None:
        with pytest.raises(DecodeFailedError) as exc_info:
            decoder.decode(EnumSignerOperation.SIGN_EVENT, {"event": "secret-event-body"})
        assert "secret-event-body" not in str(exc_info.value)
