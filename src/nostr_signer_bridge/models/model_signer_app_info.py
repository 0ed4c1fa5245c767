# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Installed signer application metadata."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelSignerAppInfo(BaseModel):
    """Metadata for one installed signer application.

    Attributes:
        name: Display name
        package_name: Identifier used to route requests to this signer
        icon_data: Base64 icon data, when available
        icon_url: Icon URL, when available
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(description="Display name")
    package_name: str = Field(min_length=1, description="Signer identifier")
    icon_data: str | None = Field(default=None, description="Base64 icon data")
    icon_url: str | None = Field(default=None, description="Icon URL")


__all__ = ["ModelSignerAppInfo"]
