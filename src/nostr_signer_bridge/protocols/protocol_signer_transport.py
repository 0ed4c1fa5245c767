# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol definition for the signer transport.

The transport launches the external signer with a request and a correlation
tag. The result comes back later, on an unrelated call stack, through
``SignerFacade.handle_completion(tag, completion)``.

Delivery Contract:
    - submit() either raises synchronously (no completion will follow) or
      returns, after which exactly one completion is delivered under correct
      use
    - The transport supports a single outstanding request
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ProtocolSignerTransport(Protocol):
    """One-shot, asynchronous request channel to an external signer."""

    def submit(self, request: object, tag: int) -> None:
        """Hand ``request`` to the external signer.

        Args:
            request: Opaque request produced by the request builder.
            tag: Correlation tag the completion will be delivered with.

        Raises:
            Exception: If the request cannot be dispatched (for example no
                installed application can handle it).
        """
        ...


__all__: list[str] = ["ProtocolSignerTransport"]
