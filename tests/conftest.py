# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pytest configuration and shared fixtures for nostr_signer_bridge tests."""

from __future__ import annotations

import pytest

from nostr_signer_bridge.enums import EnumInflightPolicy
from nostr_signer_bridge.models import ModelSignerAppInfo, ModelSignerBridgeConfig
from nostr_signer_bridge.runtime import SignerFacade
from tests.helpers.signer_fakes import (
    InMemorySignerProvider,
    RecordingRequestBuilder,
    RecordingTransport,
)

# =============================================================================
# Duck Typing Conformance Helpers
# =============================================================================


def assert_has_methods(
    obj: object,
    required_methods: list[str],
    *,
    protocol_name: str | None = None,
) -> None:
    """Assert that an object has all required methods (duck typing conformance).

    Args:
        obj: The object to check for method presence.
        required_methods: List of method names that must be present and callable.
        protocol_name: Optional protocol name for clearer error messages.

    Raises:
        AssertionError: If any required method is missing or not callable.
    """
    name = protocol_name or obj.__class__.__name__
    for method_name in required_methods:
        assert hasattr(obj, method_name), f"{name} must have '{method_name}' method"
        assert callable(
            getattr(obj, method_name)
        ), f"{name}.{method_name} must be callable"


# =============================================================================
# Collaborator Fixtures
# =============================================================================

SIGNER_PACKAGE = "com.greenart7c3.nostrsigner"


@pytest.fixture
def signer_apps() -> list[ModelSignerAppInfo]:
    """Two installed signer applications."""
    return [
        ModelSignerAppInfo(name="Amber", package_name=SIGNER_PACKAGE),
        ModelSignerAppInfo(
            name="Other Signer",
            package_name="app.signerA",
            icon_url="https://example.com/icon.png",
        ),
    ]


@pytest.fixture
def provider(signer_apps: list[ModelSignerAppInfo]) -> InMemorySignerProvider:
    """Provider with a default identity and no local answers."""
    return InMemorySignerProvider(signers=signer_apps, default_identity=SIGNER_PACKAGE)


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def request_builder() -> RecordingRequestBuilder:
    return RecordingRequestBuilder()


@pytest.fixture
def facade(
    provider: InMemorySignerProvider,
    transport: RecordingTransport,
) -> SignerFacade:
    """Facade with the default NIP-55 request builder and REJECT policy."""
    return SignerFacade(provider=provider, transport=transport)


@pytest.fixture
def overwrite_facade(
    provider: InMemorySignerProvider,
    transport: RecordingTransport,
) -> SignerFacade:
    """Facade that abandons an outstanding call when a new one starts."""
    return SignerFacade(
        provider=provider,
        transport=transport,
        config=ModelSignerBridgeConfig(inflight_policy=EnumInflightPolicy.OVERWRITE),
    )
