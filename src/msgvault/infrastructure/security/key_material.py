"""Loading of base64-encoded encryption keys from files or strings."""

from __future__ import annotations

import base64
import binascii
from pathlib import Path
from typing import Optional

from msgvault.domain.security.exceptions import InvalidEncryptionKeyError


def decode_key(encoded: str) -> bytes:
    """
    Decode a base64 key string.

    Raises
    ------
    InvalidEncryptionKeyError
        If the value is not valid base64
    """
    try:
        return base64.b64decode(encoded.strip(), validate=True)
    except (binascii.Error, ValueError) as e:
        msg = f"Failed to decode key: {e}"
        raise InvalidEncryptionKeyError(msg) from e


def encode_key(key: bytes) -> str:
    return base64.b64encode(key).decode("ascii")


def load_key(
    key_file: Optional[Path] = None,
    key_string: Optional[str] = None,
) -> bytes:
    """
    Load key material from exactly one source.

    Parameters
    ----------
    key_file
        Path to a file holding the base64 key
    key_string
        The base64 key itself

    Returns
    -------
    Raw key bytes (length is checked by the cipher, not here)

    Raises
    ------
    InvalidEncryptionKeyError
        If no source or both sources are given, the file cannot be
        read, or the content is not valid base64
    """
    if key_file is not None and key_string:
        msg = "Specify either a key file or a key string, not both"
        raise InvalidEncryptionKeyError(msg)

    if key_file is not None:
        try:
            encoded = key_file.read_text(encoding="utf-8")
        except OSError as e:
            msg = f"Failed to read key file: {e}"
            raise InvalidEncryptionKeyError(msg) from e
        return decode_key(encoded)

    if key_string:
        return decode_key(key_string)

    msg = "Either a key file or a key string must be specified"
    raise InvalidEncryptionKeyError(msg)
