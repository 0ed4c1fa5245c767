# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Signer Bridge Models Module.

Exports:
    ModelRawResultPayload: Tagged key/value view of a signer result bundle
    ModelResultValue: Discriminated union of payload value variants
    ModelSignerAppInfo: Installed signer application metadata
    ModelSignerBridgeConfig: Facade configuration
    ModelSignerCompletion: Completion event delivered by the host
    ModelSignerRequest: NIP-55 intent-style outbound request
    ModelSignerRequestParams: Inputs for a signer operation
    ModelPublicKeyResult, ModelSignEventResult, ModelTextResult,
    ModelRelaysResult: Typed result records
"""

from nostr_signer_bridge.models.model_raw_result_payload import ModelRawResultPayload
from nostr_signer_bridge.models.model_result_value import (
    ModelResultValue,
    ModelResultValueBool,
    ModelResultValueFloat,
    ModelResultValueInt,
    ModelResultValueNull,
    ModelResultValueString,
    to_result_value,
)
from nostr_signer_bridge.models.model_signer_app_info import ModelSignerAppInfo
from nostr_signer_bridge.models.model_signer_bridge_config import (
    ModelSignerBridgeConfig,
)
from nostr_signer_bridge.models.model_signer_completion import ModelSignerCompletion
from nostr_signer_bridge.models.model_signer_request import ModelSignerRequest
from nostr_signer_bridge.models.model_signer_request_params import (
    ModelSignerRequestParams,
)
from nostr_signer_bridge.models.model_signer_results import (
    ModelPublicKeyResult,
    ModelRelaysResult,
    ModelSignEventResult,
    ModelTextResult,
    SignerResult,
)

__all__: list[str] = [
    "ModelPublicKeyResult",
    "ModelRawResultPayload",
    "ModelRelaysResult",
    "ModelResultValue",
    "ModelResultValueBool",
    "ModelResultValueFloat",
    "ModelResultValueInt",
    "ModelResultValueNull",
    "ModelResultValueString",
    "ModelSignEventResult",
    "ModelSignerAppInfo",
    "ModelSignerBridgeConfig",
    "ModelSignerCompletion",
    "ModelSignerRequest",
    "ModelSignerRequestParams",
    "ModelTextResult",
    "SignerResult",
    "to_result_value",
]
