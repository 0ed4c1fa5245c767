# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Tagged value variants for signer result payloads.

The external signer returns its result as an untyped key/value bundle whose
values may be strings, booleans, integers, floating point numbers, or null.
Each value is lifted into one of the variants below at the transport
boundary, so the decoder works on an explicit union instead of inspecting
runtime types.

Example:
    >>> to_result_value("deadbeef")
    ModelResultValueString(kind='string', value='deadbeef')
    >>> to_result_value(True).as_text()
    'true'
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class ModelResultValueString(BaseModel):
    """String value, passed through verbatim."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["string"] = "string"
    value: str

    def as_text(self) -> str | None:
        return self.value


class ModelResultValueBool(BaseModel):
    """Boolean value, rendered as ``true``/``false`` when text is expected."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["bool"] = "bool"
    value: bool

    def as_text(self) -> str | None:
        return "true" if self.value else "false"


class ModelResultValueInt(BaseModel):
    """Integer value."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["int"] = "int"
    value: int

    def as_text(self) -> str | None:
        return str(self.value)


class ModelResultValueFloat(BaseModel):
    """Floating point value."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["float"] = "float"
    value: float

    def as_text(self) -> str | None:
        return repr(self.value)


class ModelResultValueNull(BaseModel):
    """Explicit null value."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["null"] = "null"

    def as_text(self) -> str | None:
        return None


ModelResultValue = Annotated[
    Union[
        ModelResultValueString,
        ModelResultValueBool,
        ModelResultValueInt,
        ModelResultValueFloat,
        ModelResultValueNull,
    ],
    Field(discriminator="kind"),
]


def to_result_value(raw: object) -> ModelResultValue:
    """Lift a raw payload value into its tagged variant.

    Values of any other type are stringified, matching how the host bridge
    forwards extras it has no dedicated representation for.

    Args:
        raw: Value taken from the transport's result bundle.

    Returns:
        The matching ModelResultValue variant.
    """
    if raw is None:
        return ModelResultValueNull()
    # bool is a subclass of int, so it must be checked first
    if isinstance(raw, bool):
        return ModelResultValueBool(value=raw)
    if isinstance(raw, int):
        return ModelResultValueInt(value=raw)
    if isinstance(raw, float):
        return ModelResultValueFloat(value=raw)
    if isinstance(raw, str):
        return ModelResultValueString(value=raw)
    return ModelResultValueString(value=str(raw))


__all__ = [
    "ModelResultValue",
    "ModelResultValueBool",
    "ModelResultValueFloat",
    "ModelResultValueInt",
    "ModelResultValueNull",
    "ModelResultValueString",
    "to_result_value",
]
