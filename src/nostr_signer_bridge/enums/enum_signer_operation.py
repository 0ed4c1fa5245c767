# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Signer Operation Enumeration.

Defines the eight operations an external NIP-55 signer can perform on behalf
of the calling application.
"""

from enum import Enum


class EnumSignerOperation(str, Enum):
    """Operations supported by an external NIP-55 signer.

    The string values match the ``type`` extra of the NIP-55 intent protocol.

    Attributes:
        GET_PUBLIC_KEY: Retrieve the signer's public key (npub)
        SIGN_EVENT: Sign a serialized Nostr event
        NIP04_ENCRYPT: Encrypt plaintext with the NIP-04 scheme
        NIP04_DECRYPT: Decrypt ciphertext with the NIP-04 scheme
        NIP44_ENCRYPT: Encrypt plaintext with the NIP-44 scheme
        NIP44_DECRYPT: Decrypt ciphertext with the NIP-44 scheme
        DECRYPT_ZAP_EVENT: Decrypt a private zap request event
        GET_RELAYS: Fetch the signer's relay list as JSON
    """

    GET_PUBLIC_KEY = "get_public_key"
    SIGN_EVENT = "sign_event"
    NIP04_ENCRYPT = "nip04_encrypt"
    NIP04_DECRYPT = "nip04_decrypt"
    NIP44_ENCRYPT = "nip44_encrypt"
    NIP44_DECRYPT = "nip44_decrypt"
    DECRYPT_ZAP_EVENT = "decrypt_zap_event"
    GET_RELAYS = "get_relays"


__all__ = ["EnumSignerOperation"]
