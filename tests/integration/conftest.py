# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Shared pytest configuration for signer bridge integration scenarios.

Applies the `integration` marker to every test under tests/integration/,
so scenarios can be selected with ``pytest -m integration`` without each
module repeating the marker.
"""

import pytest


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Add the integration marker to tests collected from this directory."""
    for item in items:
        if "tests/integration" in str(item.path) and item.get_closest_marker(
            "integration"
        ) is None:
            item.add_marker(pytest.mark.integration)
