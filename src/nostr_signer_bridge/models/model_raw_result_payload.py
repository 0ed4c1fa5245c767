# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Raw Result Payload Model.

Transient, immutable view of the key/value bundle an external signer returns.
Owned by a single decode call.
"""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

from nostr_signer_bridge.models.model_result_value import (
    ModelResultValue,
    to_result_value,
)


class ModelRawResultPayload(BaseModel):
    """Unordered mapping from field name to a tagged result value.

    Attributes:
        fields: Field name to value variant. Unknown fields are kept but
            ignored by the decoder.

    Example:
        >>> payload = ModelRawResultPayload.from_mapping(
        ...     {"signature": "deadbeef", "event": "{}"}
        ... )
        >>> payload.first("signature", "result").as_text()
        'deadbeef'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    fields: dict[str, ModelResultValue] = Field(
        default_factory=dict,
        description="Field name to tagged value",
    )

    @classmethod
    def from_mapping(cls, data: Mapping[object, object]) -> ModelRawResultPayload:
        """Build a payload from the transport's raw bundle."""
        return cls(fields={str(key): to_result_value(value) for key, value in data.items()})

    @property
    def is_empty(self) -> bool:
        return not self.fields

    def first(self, *keys: str) -> ModelResultValue | None:
        """Return the value of the first key that holds a non-null value.

        Falls back to a present-but-null value so callers can tell an
        explicit null from an absent field. Returns None when no key is
        present at all.
        """
        null_value: ModelResultValue | None = None
        for key in keys:
            value = self.fields.get(key)
            if value is None:
                continue
            if value.kind != "null":
                return value
            if null_value is None:
                null_value = value
        return null_value


__all__ = ["ModelRawResultPayload"]
