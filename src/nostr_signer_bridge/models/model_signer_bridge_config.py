# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Signer Bridge Configuration Model.

Environment Variables:
    NOSTR_SIGNER_DEFAULT_PACKAGE: Default signer identity
    NOSTR_SIGNER_INFLIGHT_POLICY: ``reject`` (default) or ``overwrite``
    NOSTR_SIGNER_TIMEOUT_SECONDS: Completion timeout; unset means wait forever
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

from nostr_signer_bridge.enums import EnumInflightPolicy

ENV_DEFAULT_PACKAGE = "NOSTR_SIGNER_DEFAULT_PACKAGE"
ENV_INFLIGHT_POLICY = "NOSTR_SIGNER_INFLIGHT_POLICY"
ENV_TIMEOUT_SECONDS = "NOSTR_SIGNER_TIMEOUT_SECONDS"


class ModelSignerBridgeConfig(BaseModel):
    """Configuration for the signer facade.

    Attributes:
        default_signer: Signer identity used when neither the call nor the
            provider supplies one
        inflight_policy: What to do when a request is issued while another is
            outstanding
        timeout_seconds: Seconds to wait for a completion. None waits
            indefinitely, which is the transport's native behavior.

    Example:
        >>> config = ModelSignerBridgeConfig(
        ...     default_signer="com.greenart7c3.nostrsigner",
        ...     timeout_seconds=120.0,
        ... )
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    default_signer: str | None = Field(
        default=None,
        description="Fallback signer identity",
    )
    inflight_policy: EnumInflightPolicy = Field(
        default=EnumInflightPolicy.REJECT,
        description="Behavior for a request issued while one is outstanding",
    )
    timeout_seconds: float | None = Field(
        default=None,
        gt=0.0,
        description="Completion timeout in seconds (None waits forever)",
    )

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
    ) -> ModelSignerBridgeConfig:
        """Build a configuration from environment variables.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value.
        """
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}

        default_signer = env.get(ENV_DEFAULT_PACKAGE, "").strip()
        if default_signer:
            values["default_signer"] = default_signer

        policy = env.get(ENV_INFLIGHT_POLICY, "").strip().lower()
        if policy:
            values["inflight_policy"] = policy

        timeout = env.get(ENV_TIMEOUT_SECONDS, "").strip()
        if timeout:
            values["timeout_seconds"] = timeout

        return cls.model_validate(values)


__all__ = [
    "ENV_DEFAULT_PACKAGE",
    "ENV_INFLIGHT_POLICY",
    "ENV_TIMEOUT_SECONDS",
    "ModelSignerBridgeConfig",
]
