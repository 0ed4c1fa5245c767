# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for logging configuration helpers."""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from nostr_signer_bridge.utils.util_logging import (
    ENV_LOG_LEVEL,
    configure_logging,
    resolve_log_level,
)


class TestResolveLogLevel:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, logging.INFO),
            ("debug", logging.DEBUG),
            (" WARNING ", logging.WARNING),
            ("CRITICAL", logging.CRITICAL),
        ],
    )
    def test_valid_levels(self, value: str | None, expected: int) -> None:
        assert resolve_log_level(value) == expected

    def test_invalid_level_warns_and_uses_info(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert resolve_log_level("VERBOSE") == logging.INFO
        assert ENV_LOG_LEVEL in capsys.readouterr().err


class TestConfigureLogging:
    def test_uses_environment_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(ENV_LOG_LEVEL, "ERROR")
        with patch("logging.basicConfig") as basic_config:
            configure_logging()

        basic_config.assert_called_once()
        assert basic_config.call_args.kwargs["level"] == logging.ERROR
        assert "%(name)s" in basic_config.call_args.kwargs["format"]
