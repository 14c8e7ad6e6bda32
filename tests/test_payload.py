"""Tests for the payload generator."""

import pytest

from readbench.payload import generate_payload


class TestGeneratePayload:
    def test_empty(self):
        assert generate_payload(0) == b""

    def test_length(self):
        assert len(generate_payload(1000)) == 1000

    def test_byte_at_index_is_index_mod_255(self):
        data = generate_payload(1000)
        assert all(b == i % 255 for i, b in enumerate(data))

    def test_wraps_at_255_not_256(self):
        data = generate_payload(300)
        assert data[254] == 254
        assert data[255] == 0
        assert 255 not in data

    def test_deterministic(self):
        assert generate_payload(777) == generate_payload(777)

    def test_prefix_stable_across_lengths(self):
        assert generate_payload(1000)[:600] == generate_payload(600)

    def test_negative_length_rejected(self):
        with pytest.raises(ValueError):
            generate_payload(-1)
