"""Classify message content as plaintext or an encryption envelope."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

from msgvault.domain.security.value_objects import Envelope

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlainContent:
    """Content that is not encrypted."""

    value: Any


@dataclass(frozen=True)
class EnvelopeContent:
    """Content that resolved to an encryption envelope."""

    envelope: Envelope


ClassifiedContent = Union[PlainContent, EnvelopeContent]


def classify_content(content: Any) -> ClassifiedContent:
    """
    Resolve raw message content to a tagged variant.

    Accepted envelope shapes:
    - an Envelope instance (whatever its discriminator)
    - a mapping in envelope form, as loaded back from a JSON column
    - JSON text of that mapping

    Everything else, including text that fails to parse or has the
    discriminator set to false, is plaintext.

    Parameters
    ----------
    content
        Message content of any JSON-compatible shape

    Returns
    -------
    EnvelopeContent if content is encrypted, PlainContent otherwise
    """
    if content is None:
        return PlainContent(content)

    if isinstance(content, Envelope):
        return EnvelopeContent(content)

    if isinstance(content, Mapping):
        return _classify_mapping(content, original=content)

    if isinstance(content, str):
        try:
            parsed = json.loads(content)
        except ValueError:
            return PlainContent(content)
        if isinstance(parsed, dict):
            return _classify_mapping(parsed, original=content)

    return PlainContent(content)


def is_envelope(content: Any) -> bool:
    """Return True if content is already an encryption envelope."""
    return isinstance(classify_content(content), EnvelopeContent)


def _classify_mapping(mapping: Mapping[str, Any], original: Any) -> ClassifiedContent:
    envelope = Envelope.from_mapping(mapping)
    if envelope is not None:
        return EnvelopeContent(envelope)

    # Passed through unchanged, but worth an audit trail
    if mapping.get("encrypted") is True:
        logger.warning(
            "Content is flagged as encrypted but is not a valid envelope; "
            "treating it as plaintext",
        )
    return PlainContent(original)
