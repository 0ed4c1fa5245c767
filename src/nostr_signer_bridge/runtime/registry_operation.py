# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Operation Registry - static catalog of signer operation kinds.

Each operation kind is registered once, at import time, with:
    - its correlation tag (the request code the transport echoes back)
    - the set of call parameters that must be present before any path runs
    - the typed result record it decodes into

Tags:
    Tags are small integers starting at 1001, one per operation kind. They
    never collide and live for the whole process.

Example:
    >>> REGISTRY_OPERATION.tag_for(EnumSignerOperation.SIGN_EVENT)
    1002
    >>> sorted(REGISTRY_OPERATION.required_fields(EnumSignerOperation.NIP44_ENCRYPT))
    ['content', 'peer_pubkey', 'request_id']
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from pydantic import BaseModel

from nostr_signer_bridge.enums import EnumSignerOperation
from nostr_signer_bridge.models import (
    ModelPublicKeyResult,
    ModelRelaysResult,
    ModelSignEventResult,
    ModelTextResult,
)


@dataclass(frozen=True)
class OperationSpec:
    """Static description of one operation kind."""

    operation: EnumSignerOperation
    tag: int
    required_fields: frozenset[str]
    result_model: type[BaseModel]


class RegistryOperation:
    """Lookup table for operation specs, keyed by kind and by tag.

    Lookups for an unregistered kind raise KeyError; that is a programming
    error, not a runtime condition.
    """

    def __init__(self, specs: Iterable[OperationSpec]) -> None:
        """Build the registry.

        Raises:
            ValueError: If two specs share an operation kind or a tag.
        """
        self._by_operation: dict[EnumSignerOperation, OperationSpec] = {}
        self._by_tag: dict[int, OperationSpec] = {}
        for spec in specs:
            if spec.operation in self._by_operation:
                raise ValueError(f"Operation '{spec.operation.value}' registered twice")
            if spec.tag in self._by_tag:
                raise ValueError(
                    f"Tag {spec.tag} of '{spec.operation.value}' collides with "
                    f"'{self._by_tag[spec.tag].operation.value}'"
                )
            self._by_operation[spec.operation] = spec
            self._by_tag[spec.tag] = spec

    def tag_for(self, operation: EnumSignerOperation) -> int:
        return self._by_operation[operation].tag

    def required_fields(self, operation: EnumSignerOperation) -> frozenset[str]:
        return self._by_operation[operation].required_fields

    def result_model(self, operation: EnumSignerOperation) -> type[BaseModel]:
        return self._by_operation[operation].result_model

    def operation_for_tag(self, tag: int) -> EnumSignerOperation | None:
        spec = self._by_tag.get(tag)
        return spec.operation if spec is not None else None

    def operations(self) -> list[EnumSignerOperation]:
        return list(self._by_operation)


_ENCRYPT_FIELDS = frozenset({"content", "request_id", "peer_pubkey"})

REGISTRY_OPERATION = RegistryOperation(
    [
        OperationSpec(
            EnumSignerOperation.GET_PUBLIC_KEY, 1001, frozenset(), ModelPublicKeyResult
        ),
        OperationSpec(
            EnumSignerOperation.SIGN_EVENT,
            1002,
            frozenset({"content", "request_id"}),
            ModelSignEventResult,
        ),
        OperationSpec(EnumSignerOperation.NIP04_ENCRYPT, 1003, _ENCRYPT_FIELDS, ModelTextResult),
        OperationSpec(EnumSignerOperation.NIP04_DECRYPT, 1004, _ENCRYPT_FIELDS, ModelTextResult),
        OperationSpec(EnumSignerOperation.NIP44_ENCRYPT, 1005, _ENCRYPT_FIELDS, ModelTextResult),
        OperationSpec(EnumSignerOperation.NIP44_DECRYPT, 1006, _ENCRYPT_FIELDS, ModelTextResult),
        OperationSpec(
            EnumSignerOperation.DECRYPT_ZAP_EVENT,
            1007,
            frozenset({"content", "request_id"}),
            ModelTextResult,
        ),
        OperationSpec(
            EnumSignerOperation.GET_RELAYS, 1008, frozenset({"request_id"}), ModelRelaysResult
        ),
    ]
)


__all__: list[str] = [
    "REGISTRY_OPERATION",
    "OperationSpec",
    "RegistryOperation",
]
