"""Unit tests for the Envelope value object."""

import json

import pytest

from msgvault.domain.security.value_objects import ENVELOPE_FIELDS, Envelope


class TestEnvelope:
    """Test envelope conversion to and from its interchange form."""

    def test_to_dict_uses_fixed_field_names(self):
        envelope = Envelope(data="ZGF0YQ==", nonce="bm9uY2U=")

        assert envelope.to_dict() == {
            "data": "ZGF0YQ==",
            "nonce": "bm9uY2U=",
            "encrypted": True,
        }
        assert tuple(envelope.to_dict()) == ENVELOPE_FIELDS

    def test_to_json_roundtrip(self):
        envelope = Envelope(data="ZGF0YQ==", nonce="bm9uY2U=")

        text = envelope.to_json()

        assert json.loads(text)["encrypted"] is True
        assert Envelope.from_json(text) == envelope

    def test_from_mapping(self):
        mapping = {"data": "a", "nonce": "b", "encrypted": True}

        assert Envelope.from_mapping(mapping) == Envelope(data="a", nonce="b")

    @pytest.mark.parametrize(
        "mapping",
        [
            {"data": "a", "nonce": "b", "encrypted": False},
            {"data": "a", "nonce": "b"},
            {"data": "a", "nonce": "b", "encrypted": "true"},
            {"data": "a", "nonce": "b", "encrypted": 1},
            {"data": 1, "nonce": "b", "encrypted": True},
            {"nonce": "b", "encrypted": True},
        ],
    )
    def test_from_mapping_rejects_invalid_shapes(self, mapping):
        assert Envelope.from_mapping(mapping) is None

    @pytest.mark.parametrize(
        "text",
        ["hello", "", "[1, 2]", "42", "null", '{"data": "a"'],
    )
    def test_from_json_rejects_non_envelopes(self, text):
        assert Envelope.from_json(text) is None

    def test_envelope_is_immutable(self):
        envelope = Envelope(data="a", nonce="b")

        with pytest.raises(AttributeError):
            envelope.data = "c"  # type: ignore[misc]

    def test_repr_hides_ciphertext(self):
        envelope = Envelope(data="c2VjcmV0", nonce="bm9uY2U=")

        assert "c2VjcmV0" not in repr(envelope)
